"""Time window interval checking shared by job and vehicle shift checks.

A list of time windows is valid when every window parses as a pair of
RFC3339 timestamps, every start strictly precedes its end, and no two
windows overlap. Windows are half-open intervals [start, end) unless
`touching_is_overlap` is set, so contiguous windows are accepted.

Malformed windows are reported and left out of the overlap scan since an
invalid interval cannot be compared with others.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from vrp_problem.core.enums import WindowIssueKind
from vrp_problem.core.schemas import TimeWindow
from .config import TOUCHING_WINDOWS_OVERLAP

_RFC3339_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


@dataclass(frozen=True)
class WindowIssue:
    """A problem found in a list of time windows.

    Attributes:
        kind: What is wrong (invalid timestamp, start not before end, overlap).
        indices: Positions of the offending windows in the input list.
            One index for validity issues, two for overlaps.
        message: Human-readable description without owner context.
    """

    kind: WindowIssueKind
    indices: Tuple[int, ...]
    message: str


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC3339 timestamp into a timezone-aware datetime.

    An explicit offset (or "Z") is required. Fractional seconds beyond
    microsecond precision are truncated. A leap second (":60") is read as
    the last microsecond of second 59.

    Args:
        text: Timestamp text, e.g. "2020-07-04T12:00:00Z".

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If text is not a valid RFC3339 timestamp.

    Examples:
        >>> parse_rfc3339("2020-07-04T12:00:00+02:00").isoformat()
        '2020-07-04T12:00:00+02:00'
    """
    if not isinstance(text, str):
        raise ValueError(f"expected timestamp string, got {type(text).__name__}")

    match = _RFC3339_RE.match(text)
    if match is None:
        raise ValueError(f"not an RFC3339 timestamp: {text!r}")

    date_part, time_part, fraction, offset = match.groups()
    fraction = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
    # Leap second: datetime has no second 60, use the last instant of second 59
    if time_part.endswith(":60"):
        time_part = f"{time_part[:-3]}:59"
        fraction = ".999999"
    if offset in ("Z", "z"):
        offset = "+00:00"

    try:
        return datetime.fromisoformat(f"{date_part}T{time_part}{fraction}{offset}")
    except ValueError as e:
        raise ValueError(f"not an RFC3339 timestamp: {text!r} ({e})") from e


def _parse_window(window: TimeWindow) -> Tuple[Optional[datetime], Optional[datetime], List[str]]:
    problems = []
    bounds = []
    for name, value in (("start", window.start), ("end", window.end)):
        try:
            bounds.append(parse_rfc3339(value))
        except ValueError as e:
            problems.append(f"{name} {e}")
            bounds.append(None)
    return bounds[0], bounds[1], problems


def check_time_windows(
    windows: Sequence[TimeWindow],
    touching_is_overlap: bool = TOUCHING_WINDOWS_OVERLAP,
) -> List[WindowIssue]:
    """Check a list of time windows for validity and overlaps.

    Args:
        windows: Time windows in caller order (not assumed sorted).
        touching_is_overlap: Treat windows sharing only a boundary instant
            as overlapping. Defaults to the half-open policy from config.

    Returns:
        List of WindowIssue objects, empty when all windows are valid and
        pairwise disjoint. Validity issues come first in input order,
        followed by overlaps in ascending start order.

    Examples:
        >>> issues = check_time_windows([
        ...     TimeWindow("2020-07-04T10:00:00Z", "2020-07-04T14:00:00Z"),
        ...     TimeWindow("2020-07-04T13:00:00Z", "2020-07-04T17:00:00Z"),
        ... ])
        >>> [(i.kind.value, i.indices) for i in issues]
        [('overlap', (0, 1))]
    """
    issues: List[WindowIssue] = []
    valid: List[Tuple[datetime, datetime, int]] = []

    for index, window in enumerate(windows):
        start, end, problems = _parse_window(window)
        if problems:
            issues.append(
                WindowIssue(
                    kind=WindowIssueKind.INVALID_TIMESTAMP,
                    indices=(index,),
                    message=f"time window {index} has invalid {'; '.join(problems)}",
                )
            )
            continue

        if start >= end:
            issues.append(
                WindowIssue(
                    kind=WindowIssueKind.INVALID_ORDER,
                    indices=(index,),
                    message=(
                        f"time window {index} start {window.start} "
                        f"is not before end {window.end}"
                    ),
                )
            )
            continue

        valid.append((start, end, index))

    # Compare each window with the one reaching furthest so far, so that a long
    # window is matched against every later window it covers
    valid.sort(key=lambda item: (item[0], item[2]))
    furthest: Optional[Tuple[datetime, datetime, int]] = None
    for start, end, index in valid:
        if furthest is not None:
            _, furthest_end, furthest_index = furthest
            if start < furthest_end or (touching_is_overlap and start == furthest_end):
                first, second = sorted((furthest_index, index))
                issues.append(
                    WindowIssue(
                        kind=WindowIssueKind.OVERLAP,
                        indices=(first, second),
                        message=(
                            f"time windows {first} [{windows[first].start}, {windows[first].end}] "
                            f"and {second} [{windows[second].start}, {windows[second].end}] overlap"
                        ),
                    )
                )
        if furthest is None or end > furthest[1]:
            furthest = (start, end, index)

    return issues


__all__ = ["WindowIssue", "check_time_windows", "parse_rfc3339"]
