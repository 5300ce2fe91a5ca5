"""Duplicate vehicle ids validation check.

Vehicle ids must be unique across the whole fleet, not only within the
vehicle type declaring them. All ids are flattened into one list before
duplicate detection so that an id shared by two vehicle types is caught.
"""

from __future__ import annotations

from typing import List

from vrp_problem.core.enums import ErrorCode
from vrp_problem.core.schemas import Problem
from ..models import ValidationError
from ._common import find_duplicates


class DuplicateVehicleIdsCheck:
    """Validate that vehicle ids are unique across the fleet."""

    check_id = "duplicate_vehicle_ids"
    code = ErrorCode.DUPLICATE_VEHICLE_IDS

    def validate(self, problem: Problem) -> List[ValidationError]:
        """Report each duplicated vehicle id once, with the vehicle types declaring it."""
        vehicles = problem.fleet.vehicles
        flat = list(problem.fleet.flat_vehicle_ids())

        errors = []
        for vehicle_id, positions in find_duplicates(vehicle_id for vehicle_id, _, _ in flat):
            occurrences = [flat[p] for p in positions]
            type_ids = list(dict.fromkeys(vehicles[t].type_id for _, t, _ in occurrences))
            errors.append(
                ValidationError(
                    code=self.code,
                    message=(
                        f"vehicle id '{vehicle_id}' is used {len(positions)} times "
                        f"in vehicle types {', '.join(repr(t) for t in type_ids)}"
                    ),
                    entity_ids=(vehicle_id, *type_ids),
                    field_paths=tuple(
                        f"fleet.vehicles[{t}].vehicleIds[{i}]" for _, t, i in occurrences
                    ),
                )
            )
        return errors
