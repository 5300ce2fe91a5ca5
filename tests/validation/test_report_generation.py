"""Pytest tests for validation report generation."""

import json
from pathlib import Path

import pytest

from vrp_problem.core.enums import ErrorCode
from vrp_problem.validation.config import MAX_MESSAGES_PER_CODE
from vrp_problem.validation.models import ValidationError, ValidationReport


@pytest.fixture
def mock_errors():
    """Fixture for ValidationError objects of three codes."""
    return [
        ValidationError(
            code=ErrorCode.DUPLICATE_JOB_IDS,
            message="job id 'job1' is used 2 times",
            entity_ids=("job1",),
            field_paths=("plan.jobs[0]", "plan.jobs[3]"),
        ),
        ValidationError(
            code=ErrorCode.JOB_TIME_WINDOWS,
            message="job 'job2' pickup 0: time window 0 start b is not before end a",
            entity_ids=("job2",),
            field_paths=("plan.jobs[1].pickups[0].times[0]",),
        ),
        ValidationError(
            code=ErrorCode.DUPLICATE_JOB_IDS,
            message="job id 'job5' is used 3 times",
            entity_ids=("job5",),
        ),
    ]


@pytest.fixture
def mock_validation_report(mock_errors):
    """Fixture for a ValidationReport loaded from a file."""
    return ValidationReport(
        errors=mock_errors,
        checks_run=["duplicate_job_ids", "demand_balance", "job_time_windows"],
        source_path=Path("problems/berlin.json"),
    )


class TestValidationError:
    def test_to_dict(self, mock_errors):
        assert mock_errors[0].to_dict() == {
            "code": "E1000",
            "message": "job id 'job1' is used 2 times",
            "entity_ids": ["job1"],
            "field_paths": ["plan.jobs[0]", "plan.jobs[3]"],
        }

    def test_is_immutable(self, mock_errors):
        with pytest.raises(AttributeError):
            mock_errors[0].message = "changed"

    def test_rejects_plain_string_code(self):
        with pytest.raises(ValueError, match="Invalid code"):
            ValidationError(code="E1000", message="x")  # type: ignore[arg-type]

    def test_rejects_empty_message(self):
        with pytest.raises(ValueError, match="message"):
            ValidationError(code=ErrorCode.DUPLICATE_JOB_IDS, message="")


class TestValidationReport:
    def test_counts(self, mock_validation_report):
        assert mock_validation_report.has_errors()
        assert not mock_validation_report.is_valid()
        assert mock_validation_report.get_error_count() == 3
        assert mock_validation_report.count_by_code() == {
            ErrorCode.DUPLICATE_JOB_IDS: 2,
            ErrorCode.JOB_TIME_WINDOWS: 1,
        }

    def test_get_errors_filters_by_code(self, mock_validation_report, mock_errors):
        assert mock_validation_report.get_errors() == mock_errors
        assert mock_validation_report.get_errors(ErrorCode.DUPLICATE_JOB_IDS) == [
            mock_errors[0],
            mock_errors[2],
        ]
        assert mock_validation_report.get_errors("E1002") == [mock_errors[1]]
        assert mock_validation_report.get_errors(ErrorCode.DUPLICATE_VEHICLE_IDS) == []

    def test_empty_report_is_valid(self):
        report = ValidationReport()
        assert report.is_valid()
        assert not report.has_errors()
        assert report.count_by_code() == {}

    def test_summary(self, mock_validation_report):
        summary = mock_validation_report.summary()
        assert "Source: berlin.json" in summary
        assert "Checks: 3 executed" in summary
        assert "Errors: 3 (E1000: 2, E1002: 1)" in summary

    def test_summary_in_memory(self):
        assert "<in-memory problem>" in ValidationReport().summary()

    def test_to_markdown(self, mock_validation_report):
        md = mock_validation_report.to_markdown()
        assert md.startswith("# Validation Report: berlin.json")
        assert "## ❌ Errors" in md
        assert "### ❌ E1000: Duplicated job ids (2)" in md
        assert "### ❌ E1002: Invalid or overlapping job time windows (1)" in md
        assert "- job id 'job1' is used 2 times (`plan.jobs[0], plan.jobs[3]`)" in md
        # Error without field paths has no location suffix
        assert "- job id 'job5' is used 3 times\n" in md

    def test_to_markdown_valid(self):
        md = ValidationReport(checks_run=["duplicate_job_ids"]).to_markdown()
        assert "## ✅ All Checks Passed" in md
        assert "❌" not in md

    def test_to_json(self, mock_validation_report):
        data = json.loads(mock_validation_report.to_json())
        assert data["metadata"]["source_path"] == "berlin.json"
        assert "generated_at" in data["metadata"]
        assert data["summary"] == {
            "checks_run": ["duplicate_job_ids", "demand_balance", "job_time_windows"],
            "valid": False,
            "errors": 3,
            "by_code": {"E1000": 2, "E1002": 1},
        }
        assert [e["code"] for e in data["errors"]] == ["E1000", "E1002", "E1000"]

    def test_console_summary_truncates_messages(self):
        errors = [
            ValidationError(code=ErrorCode.DUPLICATE_VEHICLE_IDS, message=f"vehicle id 'v{i}'")
            for i in range(MAX_MESSAGES_PER_CODE + 2)
        ]
        text = ValidationReport(errors=errors).to_console_summary()
        assert f"E1004 Duplicated vehicle ids: {MAX_MESSAGES_PER_CODE + 2} errors" in text
        assert f"vehicle id 'v{MAX_MESSAGES_PER_CODE - 1}'" in text
        assert f"vehicle id 'v{MAX_MESSAGES_PER_CODE}'" not in text
        assert "... and 2 more" in text

    def test_console_summary_valid(self):
        assert "All validation checks passed" in ValidationReport().to_console_summary()
