"""Tests for the VehicleShiftTimesCheck validation."""

import pytest

from vrp_problem.core.enums import ErrorCode
from vrp_problem.validation.checks.job_time_windows import JobTimeWindowsCheck
from vrp_problem.validation.checks.vehicle_shift_times import VehicleShiftTimesCheck

from conftest import make_job, make_problem, make_task, make_vehicle_type, ts


def _check(*vehicles):
    return VehicleShiftTimesCheck().validate(make_problem(vehicles=vehicles))


def test_valid_shifts_pass(valid_problem):
    assert VehicleShiftTimesCheck().validate(valid_problem) == []


def test_shift_without_windows_passes():
    assert _check(make_vehicle_type("car", ["car_1"], times=())) == []


def test_reversed_shift_window():
    errors = _check(make_vehicle_type("car", ["car_1"], times=[(ts(20), ts(8))]))

    assert len(errors) == 1
    error = errors[0]
    assert error.code == ErrorCode.VEHICLE_SHIFT_TIMES
    assert error.entity_ids == ("car",)
    assert error.field_paths == ("fleet.vehicles[0].shift.times[0]",)
    assert error.message.startswith("vehicle type 'car' shift:")


def test_overlapping_shift_windows():
    errors = _check(
        make_vehicle_type("car", ["car_1"]),
        make_vehicle_type("truck", ["truck_1"], times=[(ts(6), ts(13)), (ts(12), ts(18))]),
    )

    assert len(errors) == 1
    assert errors[0].entity_ids == ("truck",)
    assert errors[0].field_paths == (
        "fleet.vehicles[1].shift.times[0]",
        "fleet.vehicles[1].shift.times[1]",
    )


@pytest.mark.parametrize(
    "times",
    [
        [(ts(10), ts(12)), (ts(12), ts(14))],
        [(ts(10), ts(14)), (ts(13), ts(17))],
        [(ts(12), ts(11))],
        [("garbage", ts(11)), (ts(8), ts(9))],
        [(ts(8), ts(18)), (ts(9), ts(10)), (ts(12), ts(13))],
    ],
)
def test_same_window_semantics_as_job_time_windows(times):
    """Shift windows and job task windows yield the same interval findings."""
    shift_errors = _check(make_vehicle_type("car", ["car_1"], times=times))
    job_errors = JobTimeWindowsCheck().validate(
        make_problem(jobs=[make_job("job1", pickups=[make_task(times=times)])])
    )

    def _window_suffixes(errors):
        return [tuple(p.rsplit(".", 1)[1] for p in e.field_paths) for e in errors]

    def _details(errors):
        return [e.message.split(": ", 1)[1] for e in errors]

    assert _window_suffixes(shift_errors) == _window_suffixes(job_errors)
    assert _details(shift_errors) == _details(job_errors)
