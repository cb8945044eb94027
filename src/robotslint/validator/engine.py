"""Validation engine — scans a robots.txt document line by line."""

from __future__ import annotations

import logging

from robotslint.validator.checks import CHECKS
from robotslint.validator.directives import Directive, DirectiveCategory, classify, lookup
from robotslint.validator.models import Finding, Severity, ValidationResult

logger = logging.getLogger(__name__)

# RFC 9309 section 2.5: crawlers must parse at least 500 KiB
MAX_SIZE_BYTES = 500 * 1024

_GROUPED = (Directive.ALLOW, Directive.DISALLOW)

_BOM = "\ufeff"


class RobotsTxtValidator:
    """Validates robots.txt content against RFC 9309.

    Holds no state between calls; every ``validate`` call builds its own
    finding lists and grouping state.
    """

    def validate(self, content: str) -> ValidationResult:
        """Validate a whole document and return its findings.

        Never raises for string input: every anomaly becomes a Finding.
        """
        errors: list[Finding] = []
        warnings: list[Finding] = []

        # A leading byte-order mark is not part of the first directive
        if content.startswith(_BOM):
            content = content[1:]

        if not content or not content.strip():
            errors.append(_finding(0, "Robots.txt file is empty", Severity.ERROR))
            return ValidationResult(errors=tuple(errors))

        self._check_document(content, warnings)

        current_user_agent: str | None = None
        has_user_agent = False

        for line_number, raw in enumerate(content.split("\n"), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            if ":" not in line:
                errors.append(
                    _finding(
                        line_number,
                        "Invalid format: directive must contain colon separator",
                        Severity.ERROR,
                    )
                )
                continue

            name, _, value = line.partition(":")
            name = name.strip().lower()
            value = value.strip()

            classification = _classify_warning(name, line_number)
            if classification is not None:
                warnings.append(classification)

            directive = lookup(name)
            if directive in _GROUPED and current_user_agent is None:
                errors.append(
                    _finding(
                        line_number,
                        f"'{name}' must follow a user-agent directive "
                        "(RFC 9309 Section 2.2.1)",
                        Severity.ERROR,
                    )
                )
                continue

            check = CHECKS.get(directive)
            if check is not None:
                for finding in check(directive, value, line_number):
                    if finding.severity is Severity.ERROR:
                        errors.append(finding)
                    else:
                        warnings.append(finding)

            if directive is Directive.USER_AGENT:
                current_user_agent = value
                has_user_agent = True

        if not has_user_agent:
            errors.append(
                _finding(
                    0,
                    "File must contain at least one user-agent directive (RFC 9309)",
                    Severity.ERROR,
                )
            )

        result = ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
        logger.debug(
            "Validated %d bytes: %d error(s), %d warning(s)",
            len(content),
            len(result.errors),
            len(result.warnings),
        )
        return result

    def _check_document(self, content: str, warnings: list[Finding]) -> None:
        """Whole-file checks reported at line 0."""
        size = len(content.encode("utf-8", errors="surrogatepass"))
        if size > MAX_SIZE_BYTES:
            warnings.append(
                _finding(
                    0,
                    "File exceeds 500 KiB - crawlers may stop parsing beyond "
                    "this limit (RFC 9309)",
                    Severity.WARNING,
                )
            )

        if not _is_valid_utf8(content):
            warnings.append(
                _finding(0, "File should be UTF-8 encoded (RFC 9309)", Severity.WARNING)
            )


def validate_robots_txt(content: str) -> ValidationResult:
    """Validate content with a fresh validator."""
    return RobotsTxtValidator().validate(content)


def _classify_warning(name: str, line: int) -> Finding | None:
    category = classify(name)
    if category is DirectiveCategory.NONSTANDARD:
        return _finding(
            line,
            f"'{name}' is not part of RFC 9309 standard "
            "(may be ignored by some crawlers)",
            Severity.WARNING,
        )
    if category is DirectiveCategory.UNKNOWN:
        return _finding(
            line,
            f"Unknown directive '{_printable(name)}' (not in RFC 9309)",
            Severity.WARNING,
        )
    return None


def _printable(text: str) -> str:
    # Undecodable input bytes arrive as lone surrogates
    return text.encode("utf-8", errors="backslashreplace").decode("utf-8")


def _is_valid_utf8(content: str) -> bool:
    # Lone surrogates are the only str content UTF-8 cannot represent
    try:
        content.encode("utf-8").decode("utf-8")
    except UnicodeError:
        return False
    return True


def _finding(line: int, message: str, severity: Severity) -> Finding:
    return Finding(line=line, message=message, severity=severity)
