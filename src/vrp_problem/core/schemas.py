"""Domain model for pragmatic-format routing problems.

This module defines the typed, immutable representation of a problem
definition consumed by the validation engine:

- Plan side: Job, Task, Place, Location, TimeWindow
- Fleet side: VehicleType, Shift
- Problem: plan + fleet

Objects carry no validation behavior. Time window endpoints are kept as
decoded (RFC3339 text in a well-formed document) so that malformed values
reach the interval checker and become findings instead of construction
failures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Tuple, Union

from .enums import TaskRole

Number = Union[int, float]


@dataclass(frozen=True)
class Location:
    """Geographic coordinate of a place."""

    lat: float
    lng: float


@dataclass(frozen=True)
class Place:
    """A place where a task can be served.

    Attributes:
        location: Coordinate of the place.
        duration: Service duration in seconds.
        tag: Optional user tag echoed back in solutions.
    """

    location: Location
    duration: Number = 0
    tag: Optional[str] = None


@dataclass(frozen=True)
class TimeWindow:
    """A time window as a (start, end) pair of RFC3339 timestamps.

    Attributes:
        start: Start timestamp text (e.g., "2020-07-04T09:00:00Z"). Values of
            other types are kept as decoded and reported as invalid timestamps.
        end: End timestamp text.

    Examples:
        >>> TimeWindow("2020-07-04T09:00:00Z", "2020-07-04T18:00:00Z")
        TimeWindow(start='2020-07-04T09:00:00Z', end='2020-07-04T18:00:00Z')
    """

    start: Any
    end: Any


@dataclass(frozen=True)
class Task:
    """A pickup or delivery task of a job.

    Attributes:
        places: Alternative places where the task can be served.
        demand: Quantities per resource dimension (e.g., weight, volume).
        times: Time windows in which the task can be served.
    """

    places: Tuple[Place, ...]
    demand: Tuple[Number, ...]
    times: Tuple[TimeWindow, ...] = ()


@dataclass(frozen=True)
class Job:
    """A job with zero or more pickup and delivery tasks."""

    id: str
    pickups: Tuple[Task, ...] = ()
    deliveries: Tuple[Task, ...] = ()

    def tasks(self) -> Iterator[Tuple[TaskRole, int, Task]]:
        """Iterate over all tasks as (role, index within role, task).

        Pickups come first, then deliveries, each in input order.
        """
        for index, task in enumerate(self.pickups):
            yield TaskRole.PICKUP, index, task
        for index, task in enumerate(self.deliveries):
            yield TaskRole.DELIVERY, index, task


@dataclass(frozen=True)
class Shift:
    """Working time of a vehicle type."""

    times: Tuple[TimeWindow, ...] = ()


@dataclass(frozen=True)
class VehicleType:
    """A vehicle type with its concrete vehicles.

    Attributes:
        type_id: Identifier unique across the fleet's vehicle types.
        vehicle_ids: Concrete vehicle identifiers, unique across the whole fleet.
        shift: Shift whose time windows follow the same rules as job time windows.
    """

    type_id: str
    vehicle_ids: Tuple[str, ...]
    shift: Shift = field(default_factory=Shift)


@dataclass(frozen=True)
class Plan:
    """Jobs to be served."""

    jobs: Tuple[Job, ...] = ()


@dataclass(frozen=True)
class Fleet:
    """Vehicle types available to serve the plan."""

    vehicles: Tuple[VehicleType, ...] = ()

    def flat_vehicle_ids(self) -> Iterator[Tuple[str, int, int]]:
        """Iterate over every vehicle id in the fleet.

        Yields (vehicle_id, vehicle type index, index within vehicle_ids).
        Vehicle types are visited in fleet order, ids in their list order.
        """
        for type_index, vehicle_type in enumerate(self.vehicles):
            for id_index, vehicle_id in enumerate(vehicle_type.vehicle_ids):
                yield vehicle_id, type_index, id_index


@dataclass(frozen=True)
class Problem:
    """A complete problem definition: plan plus fleet."""

    plan: Plan
    fleet: Fleet
    id: Optional[str] = None


__all__ = [
    "Fleet",
    "Job",
    "Location",
    "Number",
    "Place",
    "Plan",
    "Problem",
    "Shift",
    "Task",
    "TimeWindow",
    "VehicleType",
]
