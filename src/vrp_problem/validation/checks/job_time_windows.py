"""Job time windows validation check.

Every pickup and delivery task may restrict when it can be served with a
list of time windows. Each list must hold well-formed, non-overlapping
windows; see `vrp_problem.validation.intervals` for the exact rules.
"""

from __future__ import annotations

from typing import List

from vrp_problem.core.enums import ErrorCode
from vrp_problem.core.schemas import Problem
from ..intervals import check_time_windows
from ..models import ValidationError
from ._common import format_window_path


class JobTimeWindowsCheck:
    """Validate time windows of all job tasks."""

    check_id = "job_time_windows"
    code = ErrorCode.JOB_TIME_WINDOWS

    def validate(self, problem: Problem) -> List[ValidationError]:
        """Report every interval issue of every task, tagged with job, role and task index."""
        errors = []
        for job_index, job in enumerate(problem.plan.jobs):
            for role, task_index, task in job.tasks():
                owner_path = f"plan.jobs[{job_index}].{role.field_name}[{task_index}]"
                for issue in check_time_windows(task.times):
                    errors.append(
                        ValidationError(
                            code=self.code,
                            message=f"job '{job.id}' {role.value} {task_index}: {issue.message}",
                            entity_ids=(job.id,),
                            field_paths=format_window_path(owner_path, issue.indices),
                        )
                    )
        return errors
