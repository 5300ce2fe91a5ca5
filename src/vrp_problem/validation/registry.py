"""Validation check registry and runner.

This module orchestrates validation checks:
- ALL_CHECKS: List of all available validation check instances
- run_validation(): Executes every check and returns a ValidationReport
- validate_file(): Loads a problem document and validates it
- print_report(): Displays validation results to console
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional

from vrp_problem.core.schemas import Problem
from vrp_problem.ingestion.reader import load_problem
from .checks import ValidationCheck
from .checks.duplicate_job_ids import DuplicateJobIdsCheck
from .checks.demand_balance import DemandBalanceCheck
from .checks.job_time_windows import JobTimeWindowsCheck
from .checks.duplicate_vehicle_type_ids import DuplicateVehicleTypeIdsCheck
from .checks.duplicate_vehicle_ids import DuplicateVehicleIdsCheck
from .checks.vehicle_shift_times import VehicleShiftTimesCheck
from .models import ValidationError, ValidationReport

logger = logging.getLogger(__name__)


# Registry of all available validation checks
# Order is the order of findings in every report (E1000 ... E1005)
ALL_CHECKS = [
    # Plan checks
    DuplicateJobIdsCheck(),
    DemandBalanceCheck(),
    JobTimeWindowsCheck(),
    # Fleet checks
    DuplicateVehicleTypeIdsCheck(),
    DuplicateVehicleIdsCheck(),
    VehicleShiftTimesCheck(),
]


def run_validation(
    problem: Problem,
    checks: Optional[Iterable[ValidationCheck]] = None,
    max_workers: Optional[int] = None,
) -> ValidationReport:
    """Run all validation checks on a problem definition.

    Every check runs, regardless of what earlier checks found. Findings are
    merged in check order, so the result does not depend on `max_workers`.

    Args:
        problem: Parsed problem definition.
        checks: Checks to run. Defaults to ALL_CHECKS.
        max_workers: Run checks on a thread pool of this size when greater
            than 1. Sequential otherwise.

    Returns:
        ValidationReport containing the ordered findings of all checks.

    Examples:
        >>> report = run_validation(problem)
        >>> print(report.summary())
    """
    if checks is None:
        checks = ALL_CHECKS
    checks = list(checks)

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            per_check: List[List[ValidationError]] = list(
                executor.map(lambda check: check.validate(problem), checks)
            )
    else:
        per_check = [check.validate(problem) for check in checks]

    errors: List[ValidationError] = []
    for check, found in zip(checks, per_check):
        logger.debug("Check %s (%s): %d errors", check.check_id, check.code.value, len(found))
        errors.extend(found)

    return ValidationReport(
        errors=errors,
        checks_run=[check.check_id for check in checks],
    )


def validate_file(path: Path, max_workers: Optional[int] = None) -> ValidationReport:
    """Load a problem document and run all validation checks on it.

    Args:
        path: Path to a JSON or YAML problem document.
        max_workers: Passed through to run_validation().

    Returns:
        ValidationReport with `source_path` set to the document path.

    Raises:
        FileNotFoundError: If the document does not exist.
        ProblemFormatError: If the document cannot be decoded or has the wrong structure.
    """
    path = Path(path)
    problem = load_problem(path)
    report = run_validation(problem, max_workers=max_workers)
    report.source_path = path
    return report


def print_report(report: ValidationReport) -> None:
    """Print validation report to console.

    Displays a summary followed by up to a few messages per error code.

    Args:
        report: ValidationReport to display.

    Examples:
        >>> print_report(run_validation(problem))
        Validation Summary:
          Source: <in-memory problem>
          Checks: 6 executed
          Errors: 1 (E1000: 1)

        Error Details:
        ❌ E1000 Duplicated job ids: 1 errors
           - job id 'job1' is used 2 times
    """
    print(report.to_console_summary())
