"""Problem document reader.

Maps a decoded pragmatic-format document onto the typed domain model in
`vrp_problem.core.schemas`. Only structure is checked here (required keys,
container and scalar types). Timestamp values are passed through untouched,
whatever their type, so that malformed values are reported by the validation
engine as findings.

Document shape:

    plan:
      jobs:
        - id: job1
          pickups:
            - places: [{location: {lat: 52.5, lng: 13.4}, duration: 300}]
              demand: [1]
              times: [["2020-07-04T09:00:00Z", "2020-07-04T12:00:00Z"]]
          deliveries: [...]
    fleet:
      vehicles:
        - typeId: car
          vehicleIds: [car_1, car_2]
          shift:
            times: [["2020-07-04T08:00:00Z", "2020-07-04T20:00:00Z"]]
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from vrp_problem.core.enums import TaskRole
from vrp_problem.core.schemas import (
    Fleet,
    Job,
    Location,
    Place,
    Plan,
    Problem,
    Shift,
    Task,
    TimeWindow,
    VehicleType,
)

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class ProblemFormatError(ValueError):
    """Raised when a problem document does not have the expected structure.

    Attributes:
        path: Document path of the offending element (e.g., "plan.jobs[2].id").
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def _type_name(value: Any) -> str:
    return type(value).__name__


def _mapping(value: Any, path: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ProblemFormatError(path, f"expected object, got {_type_name(value)}")
    return value


def _list(value: Any, path: str) -> List:
    if not isinstance(value, list):
        raise ProblemFormatError(path, f"expected list, got {_type_name(value)}")
    return value


def _require(data: Mapping, key: str, path: str) -> Any:
    if key not in data:
        raise ProblemFormatError(path, f"missing required field '{key}'")
    return data[key]


def _string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise ProblemFormatError(path, f"expected string, got {_type_name(value)}")
    return value


def _number(value: Any, path: str):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProblemFormatError(path, f"expected number, got {_type_name(value)}")
    return value


def _timestamp(value: Any) -> Any:
    # YAML turns unquoted timestamps into datetime objects
    if isinstance(value, datetime):
        return value.isoformat()
    # Anything else is left for the interval checker to report
    return value


def _read_time_windows(value: Any, path: str) -> tuple:
    windows = []
    for i, item in enumerate(_list(value, path)):
        item_path = f"{path}[{i}]"
        pair = _list(item, item_path)
        if len(pair) != 2:
            raise ProblemFormatError(
                item_path, f"time window must have exactly 2 timestamps, got {len(pair)}"
            )
        windows.append(
            TimeWindow(
                start=_timestamp(pair[0]),
                end=_timestamp(pair[1]),
            )
        )
    return tuple(windows)


def _read_place(value: Any, path: str) -> Place:
    data = _mapping(value, path)
    location_path = f"{path}.location"
    location = _mapping(_require(data, "location", path), location_path)
    tag = data.get("tag")
    return Place(
        location=Location(
            lat=_number(_require(location, "lat", location_path), f"{location_path}.lat"),
            lng=_number(_require(location, "lng", location_path), f"{location_path}.lng"),
        ),
        duration=_number(data.get("duration", 0), f"{path}.duration"),
        tag=_string(tag, f"{path}.tag") if tag is not None else None,
    )


def _read_task(value: Any, path: str) -> Task:
    data = _mapping(value, path)
    places = _list(_require(data, "places", path), f"{path}.places")
    demand = _list(_require(data, "demand", path), f"{path}.demand")
    times = data.get("times")
    return Task(
        places=tuple(_read_place(p, f"{path}.places[{i}]") for i, p in enumerate(places)),
        demand=tuple(_number(d, f"{path}.demand[{i}]") for i, d in enumerate(demand)),
        times=_read_time_windows(times, f"{path}.times") if times is not None else (),
    )


def _read_job(value: Any, path: str) -> Job:
    data = _mapping(value, path)
    tasks: Dict[TaskRole, tuple] = {}
    for role in TaskRole:
        key = role.field_name
        items = data.get(key) or []
        key_path = f"{path}.{key}"
        tasks[role] = tuple(
            _read_task(t, f"{key_path}[{i}]") for i, t in enumerate(_list(items, key_path))
        )
    return Job(
        id=_string(_require(data, "id", path), f"{path}.id"),
        pickups=tasks[TaskRole.PICKUP],
        deliveries=tasks[TaskRole.DELIVERY],
    )


def _read_vehicle_type(value: Any, path: str) -> VehicleType:
    data = _mapping(value, path)
    ids_path = f"{path}.vehicleIds"
    vehicle_ids = _list(_require(data, "vehicleIds", path), ids_path)
    shift_data = data.get("shift")
    shift = Shift()
    if shift_data is not None:
        shift_path = f"{path}.shift"
        times = _mapping(shift_data, shift_path).get("times")
        if times is not None:
            shift = Shift(times=_read_time_windows(times, f"{shift_path}.times"))
    return VehicleType(
        type_id=_string(_require(data, "typeId", path), f"{path}.typeId"),
        vehicle_ids=tuple(_string(v, f"{ids_path}[{i}]") for i, v in enumerate(vehicle_ids)),
        shift=shift,
    )


def read_problem(data: Any) -> Problem:
    """Build a Problem from a decoded problem document.

    Args:
        data: Decoded document (e.g., result of json.load).

    Returns:
        Typed, immutable Problem.

    Raises:
        ProblemFormatError: If the document structure is not as expected.

    Examples:
        >>> problem = read_problem({"plan": {"jobs": []}, "fleet": {"vehicles": []}})
        >>> problem.plan.jobs
        ()
    """
    root = _mapping(data, "$")
    plan = _mapping(_require(root, "plan", "$"), "plan")
    fleet = _mapping(_require(root, "fleet", "$"), "fleet")
    jobs = _list(_require(plan, "jobs", "plan"), "plan.jobs")
    vehicles = _list(_require(fleet, "vehicles", "fleet"), "fleet.vehicles")
    problem_id = root.get("id")

    return Problem(
        plan=Plan(jobs=tuple(_read_job(j, f"plan.jobs[{i}]") for i, j in enumerate(jobs))),
        fleet=Fleet(
            vehicles=tuple(
                _read_vehicle_type(v, f"fleet.vehicles[{i}]") for i, v in enumerate(vehicles)
            )
        ),
        id=str(problem_id) if problem_id is not None else None,
    )


def load_problem(path: Path) -> Problem:
    """Load a problem document from a JSON or YAML file.

    Files ending in .yaml/.yml are decoded with PyYAML, anything else as JSON.

    Args:
        path: Path to the problem document.

    Returns:
        Typed, immutable Problem.

    Raises:
        FileNotFoundError: If the file does not exist.
        ProblemFormatError: If the file cannot be decoded or has the wrong structure.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Problem file not found: {path}")

    logger.debug("Loading problem document %s", path)
    try:
        with path.open("r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProblemFormatError("$", f"failed to decode {path.name}: {e}") from e

    return read_problem(data)


__all__ = ["ProblemFormatError", "load_problem", "read_problem"]
