"""Shared pytest configuration, fixtures, and builders for problem validation tests."""

import copy
import json
from pathlib import Path
from typing import Callable, Dict, Sequence, Tuple

import pytest
import yaml

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

DAY = "2020-07-04"


def ts(hour: int, minute: int = 0) -> str:
    """RFC3339 UTC timestamp on the test day."""
    return f"{DAY}T{hour:02d}:{minute:02d}:00Z"


def windows(*pairs: Tuple[str, str]) -> Tuple[TimeWindow, ...]:
    return tuple(TimeWindow(start, end) for start, end in pairs)


def make_task(demand: Sequence = (1,), times: Sequence[Tuple[str, str]] = ()) -> Task:
    place = Place(location=Location(lat=52.52, lng=13.40), duration=300)
    return Task(places=(place,), demand=tuple(demand), times=windows(*times))


def make_job(job_id: str, pickups: Sequence[Task] = (), deliveries: Sequence[Task] = ()) -> Job:
    return Job(id=job_id, pickups=tuple(pickups), deliveries=tuple(deliveries))


def make_vehicle_type(
    type_id: str,
    vehicle_ids: Sequence[str],
    times: Sequence[Tuple[str, str]] = ((ts(8), ts(20)),),
) -> VehicleType:
    return VehicleType(
        type_id=type_id,
        vehicle_ids=tuple(vehicle_ids),
        shift=Shift(times=windows(*times)),
    )


def make_problem(jobs: Sequence[Job] = (), vehicles: Sequence[VehicleType] = ()) -> Problem:
    return Problem(plan=Plan(jobs=tuple(jobs)), fleet=Fleet(vehicles=tuple(vehicles)))


@pytest.fixture
def valid_problem() -> Problem:
    """A small consistent problem: one pickup-delivery job, one delivery job, two vehicle types."""
    return make_problem(
        jobs=[
            make_job(
                "job1",
                pickups=[make_task((1, 2), [(ts(9), ts(12))])],
                deliveries=[make_task((1, 2), [(ts(13), ts(15)), (ts(16), ts(18))])],
            ),
            make_job("job2", deliveries=[make_task((3,))]),
        ],
        vehicles=[
            make_vehicle_type("car", ["car_1", "car_2"]),
            make_vehicle_type("truck", ["truck_1"], [(ts(6), ts(12)), (ts(12), ts(18))]),
        ],
    )


_VALID_PROBLEM_DATA: Dict = {
    "id": "berlin-small",
    "plan": {
        "jobs": [
            {
                "id": "job1",
                "pickups": [
                    {
                        "places": [{"location": {"lat": 52.52, "lng": 13.40}, "duration": 300}],
                        "demand": [1],
                        "times": [[ts(9), ts(12)]],
                    }
                ],
                "deliveries": [
                    {
                        "places": [
                            {
                                "location": {"lat": 52.48, "lng": 13.35},
                                "duration": 120,
                                "tag": "door",
                            }
                        ],
                        "demand": [1],
                    }
                ],
            },
            {
                "id": "job2",
                "deliveries": [
                    {
                        "places": [{"location": {"lat": 52.50, "lng": 13.45}}],
                        "demand": [2],
                        "times": [[ts(10), ts(11)], [ts(14), ts(16)]],
                    }
                ],
            },
        ]
    },
    "fleet": {
        "vehicles": [
            {
                "typeId": "car",
                "vehicleIds": ["car_1", "car_2"],
                "shift": {"times": [[ts(8), ts(20)]]},
            }
        ]
    },
}


@pytest.fixture
def valid_problem_data() -> Dict:
    """Decoded pragmatic-format document of a consistent problem (a fresh copy per test)."""
    return copy.deepcopy(_VALID_PROBLEM_DATA)


@pytest.fixture
def write_problem(tmp_path: Path) -> Callable[..., Path]:
    """Write a problem document to tmp_path as JSON or YAML and return its path."""

    def _write(data: Dict, name: str = "problem.json") -> Path:
        path = tmp_path / name
        if path.suffix in (".yaml", ".yml"):
            path.write_text(yaml.safe_dump(data), encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
