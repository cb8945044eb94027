"""Map findings to character ranges for inline editor markers."""

from __future__ import annotations

from dataclasses import dataclass

from robotslint.validator.models import Finding, Severity, ValidationResult


@dataclass(frozen=True)
class Diagnostic:
    """A finding anchored to a span of the document.

    ``start`` and ``end`` are character offsets covering the whole line,
    newline excluded.
    """

    line: int
    start: int
    end: int
    severity: Severity
    message: str

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "start": self.start,
            "end": self.end,
            "severity": self.severity.value,
            "message": self.message,
        }


def to_diagnostics(content: str, result: ValidationResult) -> list[Diagnostic]:
    """Anchor each finding to its line.

    Whole-file findings (line 0) are shown on the first line. Findings
    pointing past the end of the document are dropped.
    """
    spans = _line_spans(content)
    diagnostics: list[Diagnostic] = []

    for finding in result.findings:
        diagnostic = _anchor(finding, spans)
        if diagnostic is not None:
            diagnostics.append(diagnostic)

    return diagnostics


def _line_spans(content: str) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    offset = 0
    for line in content.split("\n"):
        spans.append((offset, offset + len(line)))
        offset += len(line) + 1
    return spans


def _anchor(finding: Finding, spans: list[tuple[int, int]]) -> Diagnostic | None:
    line = finding.line if finding.line > 0 else 1
    if line > len(spans):
        return None
    start, end = spans[line - 1]
    return Diagnostic(
        line=line,
        start=start,
        end=end,
        severity=finding.severity,
        message=finding.message,
    )
