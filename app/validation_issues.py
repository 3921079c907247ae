"""
Issue and result types shared by the validator, the build checks and the reports.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    file: str
    message: str
    field: Optional[str] = None
    severity: str = ERROR

    def describe(self) -> str:
        where = f"{self.file} ({self.field})" if self.field else self.file
        return f"{where}: {self.message}"


@dataclass
class ValidationResult:
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __add__(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(self.errors + other.errors, self.warnings + other.warnings)

    def errors_for_file(self, path: str | Path) -> List[ValidationIssue]:
        return [e for e in self.errors if str(path) in e.file]

    def warnings_for_file(self, path: str | Path) -> List[ValidationIssue]:
        return [w for w in self.warnings if str(path) in w.file]

    def has_field_errors(self, field_path: str) -> bool:
        return any(e.field == field_path for e in self.errors)


class IssueCollector:
    """Accumulates issues for one validation pass."""

    def __init__(self):
        self.clear()

    def add_error(self, file: str | Path, message: str, field: str | None = None) -> None:
        self._errors.append(ValidationIssue(str(file), message, field, ERROR))

    def add_warning(self, file: str | Path, message: str, field: str | None = None) -> None:
        self._warnings.append(ValidationIssue(str(file), message, field, WARNING))

    def extend(self, result: ValidationResult) -> None:
        self._errors.extend(result.errors)
        self._warnings.extend(result.warnings)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def has_warnings(self) -> bool:
        return bool(self._warnings)

    def result(self) -> ValidationResult:
        return ValidationResult(list(self._errors), list(self._warnings))

    def clear(self) -> None:
        self._errors: List[ValidationIssue] = []
        self._warnings: List[ValidationIssue] = []

    def report(self) -> str:
        lines = []
        if self._errors:
            lines.append(f"❌ {len(self._errors)} Error(s):")
            lines.extend(f"  {e.describe()}" for e in self._errors)
            lines.append("")
        if self._warnings:
            lines.append(f"⚠️  {len(self._warnings)} Warning(s):")
            lines.extend(f"  {w.describe()}" for w in self._warnings)
        return "\n".join(lines)
