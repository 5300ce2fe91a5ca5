"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable validation error codes.

    Values are strings to ease serialization and CLI interchange.
    """

    DUPLICATE_JOB_IDS = "E1000"
    DEMAND_IMBALANCE = "E1001"
    JOB_TIME_WINDOWS = "E1002"
    DUPLICATE_VEHICLE_TYPE_IDS = "E1003"
    DUPLICATE_VEHICLE_IDS = "E1004"
    VEHICLE_SHIFT_TIMES = "E1005"


_TASK_FIELD_NAMES = {"pickup": "pickups", "delivery": "deliveries"}


class TaskRole(str, Enum):
    """Role of a task within a job."""

    PICKUP = "pickup"
    DELIVERY = "delivery"

    @property
    def field_name(self) -> str:
        """Document key holding tasks of this role (e.g. "pickups")."""
        return _TASK_FIELD_NAMES[self.value]


class WindowIssueKind(str, Enum):
    """Kinds of problems the interval checker reports."""

    INVALID_TIMESTAMP = "invalid_timestamp"
    INVALID_ORDER = "invalid_order"
    OVERLAP = "overlap"


__all__ = ["ErrorCode", "TaskRole", "WindowIssueKind"]
