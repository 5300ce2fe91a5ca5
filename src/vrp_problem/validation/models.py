"""Validation data models.

This module defines core data structures for validation results:
- ValidationError: One finding emitted by a rule check
- ValidationReport: Ordered findings from one validation run
"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from vrp_problem.core.enums import ErrorCode
from .config import MAX_MESSAGES_PER_CODE, get_description


@dataclass(frozen=True)
class ValidationError:
    """A single validation finding.

    Attributes:
        code: Stable error code (e.g., ErrorCode.DUPLICATE_JOB_IDS / "E1000").
        message: Human-readable description with the offending values.
        entity_ids: Ids of the entities involved (job ids, vehicle type ids, vehicle ids).
        field_paths: Document paths of the offending elements
            (e.g., "plan.jobs[3].pickups[0].times[1]").

    Examples:
        >>> ValidationError(
        ...     code=ErrorCode.DUPLICATE_JOB_IDS,
        ...     message="job id 'job1' is used 2 times",
        ...     entity_ids=("job1",),
        ...     field_paths=("plan.jobs[0]", "plan.jobs[4]"),
        ... )
    """

    code: ErrorCode
    message: str
    entity_ids: Tuple[str, ...] = ()
    field_paths: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not isinstance(self.code, ErrorCode):
            raise ValueError(f"Invalid code: {self.code}. Must be an ErrorCode.")
        if not self.message:
            raise ValueError("message must not be empty")

    def to_dict(self) -> Dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "entity_ids": list(self.entity_ids),
            "field_paths": list(self.field_paths),
        }


@dataclass
class ValidationReport:
    """Ordered validation findings for one problem definition.

    An empty error list means the definition passed every check.

    Attributes:
        errors: Findings in check order, then in each check's input order.
        checks_run: Identifiers of the checks that were executed.
        source_path: Path of the validated document (if loaded from a file).

    Examples:
        >>> report = ValidationReport(
        ...     errors=[error1, error2],
        ...     checks_run=["duplicate_job_ids", "demand_balance"],
        ...     source_path=Path("problems/berlin.json"),
        ... )
        >>> report.has_errors()
        True
        >>> report.get_error_count()
        2
    """

    errors: List[ValidationError] = field(default_factory=list)
    checks_run: List[str] = field(default_factory=list)
    source_path: Optional[Path] = None

    def is_valid(self) -> bool:
        """Return True when no validation errors were found."""
        return not self.errors

    def has_errors(self) -> bool:
        """Return True when at least one validation error was found."""
        return bool(self.errors)

    def get_error_count(self) -> int:
        """Count total number of validation errors."""
        return len(self.errors)

    def get_errors(self, code: Optional[ErrorCode] = None) -> List[ValidationError]:
        """Get all errors, optionally filtered by code.

        Args:
            code: Filter by error code. None returns all errors.

        Returns:
            List of ValidationError objects in report order.

        Examples:
            >>> duplicates = report.get_errors(ErrorCode.DUPLICATE_JOB_IDS)
        """
        if code is None:
            return list(self.errors)
        code = ErrorCode(code)
        return [e for e in self.errors if e.code == code]

    def count_by_code(self) -> Dict[ErrorCode, int]:
        """Count errors per code, ordered by code."""
        counts = Counter(e.code for e in self.errors)
        return {code: counts[code] for code in sorted(counts, key=lambda c: c.value)}

    def _source_name(self) -> str:
        return self.source_path.name if self.source_path else "<in-memory problem>"

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Returns:
            Multi-line summary string.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Source: berlin.json
              Checks: 6 executed
              Errors: 2 (E1000: 1, E1002: 1)
        """
        counts = ", ".join(f"{code.value}: {n}" for code, n in self.count_by_code().items())
        errors_line = f"  Errors: {self.get_error_count()}"
        if counts:
            errors_line += f" ({counts})"

        return (
            f"Validation Summary:\n"
            f"  Source: {self._source_name()}\n"
            f"  Checks: {len(self.checks_run)} executed\n"
            f"{errors_line}"
        )

    def to_markdown(self) -> str:
        """Generate detailed Markdown validation report.

        Returns:
            Formatted Markdown string with a header, a summary section and
            one section per error code listing every finding.
        """
        lines = [
            f"# Validation Report: {self._source_name()}",
            "",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Checks Run:** {len(self.checks_run)}",
            f"- **Errors:** {self.get_error_count()} ❌"
            if self.has_errors()
            else f"- **Errors:** {self.get_error_count()}",
            "",
        ]

        if self.is_valid():
            lines.append("## ✅ All Checks Passed")
            lines.append("")
            lines.append("No validation issues found.")
            lines.append("")
            return "\n".join(lines)

        lines.append("## ❌ Errors")
        lines.append("")
        for code, count in self.count_by_code().items():
            lines.append(f"### ❌ {code.value}: {get_description(code)} ({count})")
            lines.append("")
            for error in self.get_errors(code):
                location = f" (`{', '.join(error.field_paths)}`)" if error.field_paths else ""
                lines.append(f"- {error.message}{location}")
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate detailed JSON validation report.

        Returns:
            Formatted JSON string with metadata, summary and the ordered errors.
        """
        report_data = {
            "metadata": {
                "source_path": self.source_path.name if self.source_path else None,
                "generated_at": datetime.now().isoformat(),
            },
            "summary": {
                "checks_run": list(self.checks_run),
                "valid": self.is_valid(),
                "errors": self.get_error_count(),
                "by_code": {code.value: n for code, n in self.count_by_code().items()},
            },
            "errors": [e.to_dict() for e in self.errors],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate a concise summary for console output.

        Returns:
            The overall summary followed by up to MAX_MESSAGES_PER_CODE
            messages per error code.
        """
        lines = [self.summary(), ""]

        if self.is_valid():
            lines.append("✅ All validation checks passed!")
            return "\n".join(lines)

        lines.append("Error Details:")
        for code, count in self.count_by_code().items():
            lines.append(f"❌ {code.value} {get_description(code)}: {count} errors")
            errors = self.get_errors(code)
            for error in errors[:MAX_MESSAGES_PER_CODE]:
                lines.append(f"   - {error.message}")
            if count > MAX_MESSAGES_PER_CODE:
                lines.append(f"   ... and {count - MAX_MESSAGES_PER_CODE} more")

        return "\n".join(lines)
