"""Robots.txt validation core."""

from robotslint.validator.engine import RobotsTxtValidator, validate_robots_txt
from robotslint.validator.formatting import format_validation_results
from robotslint.validator.models import Finding, Severity, ValidationResult

__all__ = [
    "Finding",
    "RobotsTxtValidator",
    "Severity",
    "ValidationResult",
    "format_validation_results",
    "validate_robots_txt",
]
