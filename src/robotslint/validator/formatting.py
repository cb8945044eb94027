"""Plain-text rendering of validation results."""

from __future__ import annotations

from robotslint.validator.models import Finding, ValidationResult

SUCCESS_MESSAGE = "✓ Valid robots.txt (RFC 9309 compliant)"


def format_validation_results(result: ValidationResult) -> str:
    """Render errors then warnings as ``Line <n>: <message>`` blocks."""
    if result.is_valid and not result.warnings:
        return SUCCESS_MESSAGE

    output = ""
    if result.errors:
        output += "Errors:\n" + _format_lines(result.errors)

    if result.warnings:
        if output:
            output += "\n"
        output += "Warnings:\n" + _format_lines(result.warnings)

    return output


def _format_lines(findings: tuple[Finding, ...]) -> str:
    return "".join(f"  Line {f.line}: {f.message}\n" for f in findings)
