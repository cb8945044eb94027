"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's real config and env out of every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    for var in (
        "ROBOTSLINT_OUTPUT_FORMAT",
        "ROBOTSLINT_STRICT",
        "ROBOTSLINT_WEB_PORT",
    ):
        monkeypatch.delenv(var, raising=False)
    return config_home / "robotslint"


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def valid_robots_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "valid_robots.txt"


@pytest.fixture
def invalid_robots_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "invalid_robots.txt"


@pytest.fixture
def valid_robots() -> str:
    return (
        "User-agent: *\n"
        "Disallow: /admin/\n"
        "Allow: /admin/public\n"
        "\n"
        "Sitemap: https://example.com/sitemap.xml\n"
    )
