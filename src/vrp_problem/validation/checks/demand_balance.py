"""Demand balance validation check.

A job with both pickups and deliveries moves goods from its pickup places
to its delivery places, so whatever is picked up must be delivered. The
dimension-wise sum of pickup demands must equal the dimension-wise sum of
delivery demands. Jobs with only pickups or only deliveries are exempt.
"""

from __future__ import annotations

from typing import List, Sequence

from vrp_problem.core.enums import ErrorCode
from vrp_problem.core.schemas import Job, Number, Problem, Task
from ..config import DEMAND_ABS_TOL
from ..models import ValidationError


def _sum_demands(tasks: Sequence[Task], dimensions: int) -> List[Number]:
    return [sum(task.demand[d] for task in tasks) for d in range(dimensions)]


def _totals_match(left: Sequence[Number], right: Sequence[Number]) -> bool:
    return all(abs(a - b) <= DEMAND_ABS_TOL for a, b in zip(left, right))


class DemandBalanceCheck:
    """Validate that pickup and delivery demands of a job balance out."""

    check_id = "demand_balance"
    code = ErrorCode.DEMAND_IMBALANCE

    def validate(self, problem: Problem) -> List[ValidationError]:
        """Check every job having both pickups and deliveries.

        Emits at most one error per job: either a dimensionality mismatch
        (demand vectors of different lengths) or a magnitude mismatch,
        regardless of how many dimensions differ.
        """
        errors = []
        for index, job in enumerate(problem.plan.jobs):
            if not job.pickups or not job.deliveries:
                continue

            message = self._check_job(job)
            if message:
                errors.append(
                    ValidationError(
                        code=self.code,
                        message=message,
                        entity_ids=(job.id,),
                        field_paths=(f"plan.jobs[{index}]",),
                    )
                )
        return errors

    def _check_job(self, job: Job) -> str:
        pickup_dims = sorted({len(task.demand) for task in job.pickups})
        delivery_dims = sorted({len(task.demand) for task in job.deliveries})

        # Mixed dimensionality is reported as such, never zero-padded
        if len(set(pickup_dims) | set(delivery_dims)) > 1:
            return (
                f"job '{job.id}' has demands of different dimensionality: "
                f"pickups {pickup_dims}, deliveries {delivery_dims}"
            )

        dimensions = pickup_dims[0]
        pickup_total = _sum_demands(job.pickups, dimensions)
        delivery_total = _sum_demands(job.deliveries, dimensions)
        if _totals_match(pickup_total, delivery_total):
            return ""

        return (
            f"job '{job.id}' pickup demand total {pickup_total} "
            f"does not match delivery demand total {delivery_total}"
        )
