"""Validation engine for VRP problem definitions.

This module provides the rule engine that checks a parsed problem for
logical consistency before it is handed to a solver:

- **Models**: ValidationError, ValidationReport - validation result data structures
- **Checks**: One rule per error code E1000-E1005 (see validation/checks/)
- **Intervals**: Time window checking shared by job and shift rules
- **Config**: Interval semantics, tolerances and code descriptions (import from .config)
- **Registry**: run_validation(), print_report() - check orchestration and execution

Public API:
    ValidationError: A single finding with code, message and location
    ValidationReport: Ordered findings of one run with helper methods
    run_validation: Run all validation checks on a problem
    validate_file: Load a problem document and validate it
    print_report: Display validation results to console

Usage:
    >>> from vrp_problem.validation import validate_file, print_report
    >>> report = validate_file(Path("problems/berlin.json"))
    >>> print_report(report)

For implementation details:
    - See validation/checks/__init__.py for check interface conventions
    - See validation/intervals.py for the time window rules
    - See validation/registry.py for check orchestration
"""

from __future__ import annotations

from vrp_problem.core.enums import ErrorCode

from .models import ValidationError, ValidationReport
from .registry import print_report, run_validation, validate_file

__all__ = [
    # Data models
    "ValidationError",
    "ValidationReport",
    # Runner functions
    "run_validation",
    "validate_file",
    "print_report",
    # Enums
    "ErrorCode",
]
