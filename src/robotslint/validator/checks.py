"""Per-directive value checks.

Each check takes the directive, its trimmed value and the 1-based line
number, and returns the findings for that value. ``CHECKS`` is the dispatch
table the engine consults; directives without an entry get no value check.
Grouping rules (allow/disallow needing a preceding user-agent) live in the
engine because they depend on scan state.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from urllib.parse import urlsplit

from robotslint.validator.directives import Directive
from robotslint.validator.models import Finding, Severity

Check = Callable[[Directive, str, int], list[Finding]]

# RFC 9309 section 2.2.1 product token, plus the * wildcard
_USER_AGENT_TOKEN = re.compile(r"[A-Za-z0-9_*-]+")

# Anything outside printable ASCII should be percent-encoded
_NEEDS_ENCODING = re.compile(r"[^\x21-\x7E]")

# Leading numeric prefix, the way lenient float parsers read "5s" as 5
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

_SITEMAP_SCHEMES = frozenset({"http", "https"})


def _error(line: int, message: str) -> Finding:
    return Finding(line=line, message=message, severity=Severity.ERROR)


def _warning(line: int, message: str) -> Finding:
    return Finding(line=line, message=message, severity=Severity.WARNING)


def check_user_agent(directive: Directive, value: str, line: int) -> list[Finding]:
    if not value:
        return [_error(line, "user-agent value cannot be empty")]
    if not _USER_AGENT_TOKEN.fullmatch(value):
        return [
            _warning(
                line,
                "user-agent should contain only letters, numbers, hyphens, "
                "underscores, or * (RFC 9309)",
            )
        ]
    return []


def check_path(directive: Directive, value: str, line: int) -> list[Finding]:
    """Validate an allow/disallow path.

    An empty disallow means "allow everything" and is fine. Path problems
    are only ever warnings; ``*`` wildcards are accepted anywhere.
    """
    # Empty disallow allows everything; an empty allow is a no-op rule
    if not value:
        return []

    findings: list[Finding] = []
    if not value.startswith("/"):
        findings.append(
            _warning(line, "Path should start with / for proper matching (RFC 9309)")
        )
    if _NEEDS_ENCODING.search(value):
        findings.append(
            _warning(
                line,
                "Non-ASCII characters should be percent-encoded "
                "(RFC 9309 Section 2.2.2)",
            )
        )
    if "$" in value and not value.endswith("$"):
        findings.append(
            _warning(line, "$ should only appear at the end of the path (RFC 9309)")
        )
    return findings


def check_sitemap(directive: Directive, value: str, line: int) -> list[Finding]:
    if not value:
        return [_error(line, "sitemap URL cannot be empty")]

    scheme = _absolute_url_scheme(value)
    if scheme is None:
        return [_error(line, "sitemap must be a valid absolute URL")]
    if scheme not in _SITEMAP_SCHEMES:
        return [_error(line, "sitemap must use HTTP or HTTPS protocol")]
    return []


def check_crawl_delay(directive: Directive, value: str, line: int) -> list[Finding]:
    delay = parse_float_prefix(value)
    if delay is None:
        return [_warning(line, "crawl-delay value should be a number")]
    if delay < 0:
        return [_warning(line, "crawl-delay should not be negative")]
    return []


def parse_float_prefix(value: str) -> float | None:
    """Parse the leading number of ``value``, ignoring trailing text."""
    match = _FLOAT_PREFIX.match(value.lstrip())
    if match is None:
        return None
    return float(match.group(0))


def _absolute_url_scheme(value: str) -> str | None:
    """Return the lowercased scheme if ``value`` is an absolute URL."""
    try:
        parts = urlsplit(value)
        # Raises on a malformed port
        _ = parts.port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if not scheme:
        return None
    if scheme not in _SITEMAP_SCHEMES:
        return scheme

    if not parts.netloc:
        # http(s) always has an authority: "https:host/x" means "https://host/x"
        rest = value.split(":", 1)[1].lstrip("/\\")
        try:
            parts = urlsplit("//" + rest)
            _ = parts.port
        except ValueError:
            return None

    if not parts.hostname or any(c.isspace() for c in parts.netloc):
        return None
    return scheme


CHECKS: dict[Directive, Check] = {
    Directive.USER_AGENT: check_user_agent,
    Directive.DISALLOW: check_path,
    Directive.ALLOW: check_path,
    Directive.SITEMAP: check_sitemap,
    Directive.CRAWL_DELAY: check_crawl_delay,
}
