"""Directive vocabulary — the fixed set of names the validator recognises."""

from __future__ import annotations

import enum


class DirectiveCategory(enum.Enum):
    """How a directive name relates to RFC 9309."""

    STANDARD = "standard"
    NONSTANDARD = "nonstandard"
    UNKNOWN = "unknown"


class Directive(enum.Enum):
    """Known directive names, tagged with their category."""

    USER_AGENT = ("user-agent", DirectiveCategory.STANDARD)
    DISALLOW = ("disallow", DirectiveCategory.STANDARD)
    ALLOW = ("allow", DirectiveCategory.STANDARD)
    SITEMAP = ("sitemap", DirectiveCategory.STANDARD)
    CRAWL_DELAY = ("crawl-delay", DirectiveCategory.NONSTANDARD)
    REQUEST_RATE = ("request-rate", DirectiveCategory.NONSTANDARD)
    VISIT_TIME = ("visit-time", DirectiveCategory.NONSTANDARD)
    HOST = ("host", DirectiveCategory.NONSTANDARD)
    CLEAN_PARAM = ("clean-param", DirectiveCategory.NONSTANDARD)

    def __init__(self, token: str, category: DirectiveCategory) -> None:
        self.token = token
        self.category = category


_BY_TOKEN: dict[str, Directive] = {d.token: d for d in Directive}


def lookup(name: str) -> Directive | None:
    """Return the directive for a name, ignoring case, or None."""
    return _BY_TOKEN.get(name.lower())


def classify(name: str) -> DirectiveCategory:
    directive = lookup(name)
    if directive is None:
        return DirectiveCategory.UNKNOWN
    return directive.category
