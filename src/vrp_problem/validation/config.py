"""Validation configuration constants.

This module centralizes error code descriptions, comparison tolerances and
interval semantics. Adjust these constants to tune validation behavior.

Interval Semantics:
    Time windows are treated as half-open intervals [start, end). Two
    windows that only touch (one ends exactly when the next starts) do not
    overlap. Both job time windows and vehicle shift windows use the same
    setting.
"""

from __future__ import annotations

from vrp_problem.core.enums import ErrorCode

# ============================================================================
# INTERVAL CONSTANTS
# ============================================================================

# Whether windows sharing only a boundary instant count as overlapping
TOUCHING_WINDOWS_OVERLAP = False


# ============================================================================
# TOLERANCE CONSTANTS
# ============================================================================

# Absolute tolerance when comparing float demand totals; ints compare exactly
DEMAND_ABS_TOL = 1e-9


# ============================================================================
# REPORTING
# ============================================================================

# Console output shows at most this many messages per error code
MAX_MESSAGES_PER_CODE = 5


# ============================================================================
# ERROR CODES
# ============================================================================

ERROR_CODE_DESCRIPTIONS = {
    ErrorCode.DUPLICATE_JOB_IDS: "Duplicated job ids",
    ErrorCode.DEMAND_IMBALANCE: "Sum of pickup demand does not match sum of delivery demand",
    ErrorCode.JOB_TIME_WINDOWS: "Invalid or overlapping job time windows",
    ErrorCode.DUPLICATE_VEHICLE_TYPE_IDS: "Duplicated vehicle type ids",
    ErrorCode.DUPLICATE_VEHICLE_IDS: "Duplicated vehicle ids",
    ErrorCode.VEHICLE_SHIFT_TIMES: "Invalid or overlapping vehicle shift time windows",
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def get_description(code: ErrorCode) -> str:
    """Get the short description of an error code.

    Args:
        code: Error code (enum member or its string value, e.g. "E1000").

    Returns:
        Human-readable description of the error class.

    Raises:
        ValueError: If the code is unknown.

    Examples:
        >>> get_description(ErrorCode.DUPLICATE_JOB_IDS)
        'Duplicated job ids'
        >>> get_description("E1004")
        'Duplicated vehicle ids'
    """
    try:
        code = ErrorCode(code)
    except ValueError:
        raise ValueError(f"Unknown error code: {code}") from None

    return ERROR_CODE_DESCRIPTIONS[code]
