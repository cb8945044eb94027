"""Global configuration — XDG paths, config file, env vars, defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "text", "json")

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "robotslint"
    return Path.home() / ".config" / "robotslint"


@dataclass
class RobotsLintConfig:
    """Application-wide configuration."""

    config_dir: Path = field(default_factory=_default_config_dir)
    output_format: str = "table"
    strict: bool = False
    web_host: str = "127.0.0.1"  # Hardcoded — never 0.0.0.0
    web_port: int = 8471
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.output_format!r} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.yaml"

    @classmethod
    def load(cls) -> RobotsLintConfig:
        """Load config from the YAML file, then environment overrides."""
        config = cls()

        if config.config_file.is_file():
            config = config._apply_file(config.config_file)

        env_format = os.environ.get("ROBOTSLINT_OUTPUT_FORMAT")
        if env_format:
            config.output_format = env_format.lower()

        env_strict = os.environ.get("ROBOTSLINT_STRICT")
        if env_strict:
            config.strict = env_strict.lower() in _TRUE_VALUES

        env_port = os.environ.get("ROBOTSLINT_WEB_PORT")
        if env_port:
            config.web_port = int(env_port)

        # Re-run validation after overrides
        config.__post_init__()
        return config

    def _apply_file(self, path: Path) -> RobotsLintConfig:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must be a YAML mapping")
        logger.debug("Loaded config from %s", path)

        return RobotsLintConfig(
            config_dir=self.config_dir,
            output_format=str(data.get("output_format", self.output_format)).lower(),
            strict=bool(data.get("strict", self.strict)),
            web_port=int(data.get("web_port", self.web_port)),
            verbose=bool(data.get("verbose", self.verbose)),
        )
