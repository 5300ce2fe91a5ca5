"""Duplicate job ids validation check.

Job ids identify jobs in solutions and relations, so every id must be
unique within the plan.
"""

from __future__ import annotations

from typing import List

from vrp_problem.core.enums import ErrorCode
from vrp_problem.core.schemas import Problem
from ..models import ValidationError
from ._common import find_duplicates


class DuplicateJobIdsCheck:
    """Validate that job ids are unique within the plan."""

    check_id = "duplicate_job_ids"
    code = ErrorCode.DUPLICATE_JOB_IDS

    def validate(self, problem: Problem) -> List[ValidationError]:
        """Report each duplicated job id once, in order of first occurrence."""
        errors = []
        for job_id, positions in find_duplicates(job.id for job in problem.plan.jobs):
            errors.append(
                ValidationError(
                    code=self.code,
                    message=f"job id '{job_id}' is used {len(positions)} times",
                    entity_ids=(job_id,),
                    field_paths=tuple(f"plan.jobs[{i}]" for i in positions),
                )
            )
        return errors
