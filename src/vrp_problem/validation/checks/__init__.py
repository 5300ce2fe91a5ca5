"""Validation checks base interface.

This module defines the protocol (interface) that all validation checks must implement.
Each check is responsible for detecting one class of inconsistency in a problem
definition and reports it under one stable error code.

To implement a new validation check:

1. Create a new file in this directory (e.g., `my_check.py`)
2. Define a class that implements the ValidationCheck protocol
3. Set `check_id` and `code`, implement `validate()`
4. Add the check to the ALL_CHECKS list in registry.py

Example:
    ```python
    # checks/my_check.py
    from typing import List
    from vrp_problem.core.enums import ErrorCode
    from vrp_problem.core.schemas import Problem
    from ..models import ValidationError

    class MyCheck:
        check_id = "my_check"
        code = ErrorCode.DUPLICATE_JOB_IDS

        def validate(self, problem: Problem) -> List[ValidationError]:
            # Validation logic here
            return [ValidationError(...)]
    ```

Checks must be pure: they never mutate the problem, never depend on other
checks, and never raise for bad input. Anything a check can detect becomes
a ValidationError in the returned list.
"""

from __future__ import annotations

from typing import List, Protocol

from vrp_problem.core.enums import ErrorCode
from vrp_problem.core.schemas import Problem
from ..models import ValidationError


class ValidationCheck(Protocol):
    """Protocol defining the interface for validation checks.

    Use duck typing (Protocol) for flexibility - no need to inherit from a
    base class.

    Attributes:
        check_id: Unique identifier of the check (e.g., "duplicate_job_ids").
        code: Error code emitted by the check.
    """

    check_id: str
    code: ErrorCode

    def validate(self, problem: Problem) -> List[ValidationError]:
        """Run the validation check.

        Args:
            problem: Parsed problem definition.

        Returns:
            List of ValidationError objects in deterministic (input) order.
            Return empty list if validation passes completely.

        Examples:
            >>> errors = check.validate(problem)
            >>> if not errors:
            ...     print("All checks passed!")
        """
        ...


__all__ = ["ValidationCheck"]
