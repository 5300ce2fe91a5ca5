"""Vehicle shift time windows validation check.

Shift windows follow exactly the same rules as job time windows; both
checks share `check_time_windows` so edge cases behave identically.
"""

from __future__ import annotations

from typing import List

from vrp_problem.core.enums import ErrorCode
from vrp_problem.core.schemas import Problem
from ..intervals import check_time_windows
from ..models import ValidationError
from ._common import format_window_path


class VehicleShiftTimesCheck:
    """Validate shift time windows of all vehicle types."""

    check_id = "vehicle_shift_times"
    code = ErrorCode.VEHICLE_SHIFT_TIMES

    def validate(self, problem: Problem) -> List[ValidationError]:
        errors = []
        for index, vehicle_type in enumerate(problem.fleet.vehicles):
            owner_path = f"fleet.vehicles[{index}].shift"
            for issue in check_time_windows(vehicle_type.shift.times):
                errors.append(
                    ValidationError(
                        code=self.code,
                        message=f"vehicle type '{vehicle_type.type_id}' shift: {issue.message}",
                        entity_ids=(vehicle_type.type_id,),
                        field_paths=format_window_path(owner_path, issue.indices),
                    )
                )
        return errors
