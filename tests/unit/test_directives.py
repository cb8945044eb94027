"""Tests for directive vocabulary and classification."""

from robotslint.validator.directives import Directive, DirectiveCategory, classify, lookup


def test_standard_directives():
    for name in ("user-agent", "disallow", "allow", "sitemap"):
        assert classify(name) == DirectiveCategory.STANDARD


def test_nonstandard_directives():
    for name in ("crawl-delay", "request-rate", "visit-time", "host", "clean-param"):
        assert classify(name) == DirectiveCategory.NONSTANDARD


def test_unknown_directive():
    assert classify("noindex") == DirectiveCategory.UNKNOWN
    assert classify("") == DirectiveCategory.UNKNOWN


def test_classify_ignores_case():
    assert classify("User-Agent") == DirectiveCategory.STANDARD
    assert classify("CRAWL-DELAY") == DirectiveCategory.NONSTANDARD


def test_lookup():
    assert lookup("SITEMAP") is Directive.SITEMAP
    assert lookup("clean-param") is Directive.CLEAN_PARAM
    assert lookup("useragent") is None


def test_directive_attributes():
    assert Directive.HOST.token == "host"
    assert Directive.HOST.category == DirectiveCategory.NONSTANDARD
    assert len(Directive) == 9
