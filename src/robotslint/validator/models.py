"""Validation data models — immutable findings and results."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Severity(enum.Enum):
    """Finding severity level. Only errors affect validity."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Finding:
    """A single issue tied to a line number (0 = whole file)."""

    line: int
    message: str
    severity: Severity

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "message": self.message,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one document."""

    errors: tuple[Finding, ...] = ()
    warnings: tuple[Finding, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def findings(self) -> tuple[Finding, ...]:
        """Errors followed by warnings, each in emission order."""
        return self.errors + self.warnings

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": [f.to_dict() for f in self.errors],
            "warnings": [f.to_dict() for f in self.warnings],
        }
