"""Duplicate vehicle type ids validation check."""

from __future__ import annotations

from typing import List

from vrp_problem.core.enums import ErrorCode
from vrp_problem.core.schemas import Problem
from ..models import ValidationError
from ._common import find_duplicates


class DuplicateVehicleTypeIdsCheck:
    """Validate that vehicle type ids are unique within the fleet."""

    check_id = "duplicate_vehicle_type_ids"
    code = ErrorCode.DUPLICATE_VEHICLE_TYPE_IDS

    def validate(self, problem: Problem) -> List[ValidationError]:
        """Report each duplicated type id once, naming every vehicle type entry using it."""
        errors = []
        type_ids = (vehicle_type.type_id for vehicle_type in problem.fleet.vehicles)
        for type_id, positions in find_duplicates(type_ids):
            paths = tuple(f"fleet.vehicles[{i}].typeId" for i in positions)
            errors.append(
                ValidationError(
                    code=self.code,
                    message=(
                        f"vehicle type id '{type_id}' is used by {len(positions)} vehicle types: "
                        + ", ".join(f"fleet.vehicles[{i}]" for i in positions)
                    ),
                    entity_ids=(type_id,),
                    field_paths=paths,
                )
            )
        return errors
