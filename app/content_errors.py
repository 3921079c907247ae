"""
Exceptions raised by callers that want validation failures to stop a build.
The validator itself never raises for bad content; it records issues instead.
"""
from __future__ import annotations

import logging
from typing import List

from validation_issues import ERROR, ValidationIssue, ValidationResult
from validation_report import format_validation_results

logger = logging.getLogger(__name__)


class ContentError(Exception):
    def __init__(self, message: str, file: str | None = None, field: str | None = None,
                 severity: str = ERROR):
        super().__init__(message)
        self.file = file
        self.field = field
        self.severity = severity


class ContentValidationError(ContentError):
    """Raised with the full result so callers can inspect individual issues."""

    def __init__(self, result: ValidationResult):
        super().__init__(f"Content validation failed:\n{format_validation_results(result)}")
        self.result = result

    @property
    def errors(self) -> List[ValidationIssue]:
        return self.result.errors

    @property
    def warnings(self) -> List[ValidationIssue]:
        return self.result.warnings

    def errors_for_file(self, path: str) -> List[ValidationIssue]:
        return self.result.errors_for_file(path)

    def warnings_for_file(self, path: str) -> List[ValidationIssue]:
        return self.result.warnings_for_file(path)

    def has_field_errors(self, field_path: str) -> bool:
        return self.result.has_field_errors(field_path)


class BuildValidationError(ContentError):
    pass


def handle_validation_result(result: ValidationResult, raise_on_error: bool = False) -> None:
    """Log a result; optionally turn errors into a ContentError."""
    if result.errors:
        message = f"Content validation failed with {len(result.errors)} error(s):\n" + "\n".join(
            f"  - {e.describe()}" for e in result.errors
        )
        if raise_on_error:
            raise ContentError(message)
        logger.error(message)

    if result.warnings:
        logger.warning(
            "Found %d warning(s):\n%s",
            len(result.warnings),
            "\n".join(f"  - {w.describe()}" for w in result.warnings),
        )
