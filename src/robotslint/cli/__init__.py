"""Command-line interface for robotslint."""

from __future__ import annotations

import logging

import click

from robotslint import __version__
from robotslint.config import RobotsLintConfig


@click.group()
@click.version_option(version=__version__, prog_name="robotslint")
@click.option("--verbose", "-v", is_flag=True, help="Log each file as it is validated.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """robotslint — check robots.txt files against RFC 9309.

    Settings are read from $XDG_CONFIG_HOME/robotslint/config.yaml and
    ROBOTSLINT_* environment variables; command options override both.
    """
    try:
        config = RobotsLintConfig.load()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    config.verbose = verbose or config.verbose
    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _register_commands() -> None:
    from robotslint.cli.check import check
    from robotslint.cli.server import server

    main.add_command(check)
    main.add_command(server)


_register_commands()
