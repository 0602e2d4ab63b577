"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from es5guard import __version__

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


@click.group()
@click.version_option(version=__version__, prog_name="es5guard")
@click.option(
    "--settings",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML settings file (default: ./.es5guard.yaml).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, settings: str | None, verbose: bool) -> None:
    """es5guard — check build output for syntax newer than ES5."""
    ctx.ensure_object(dict)
    ctx.obj["settings_path"] = settings
    ctx.obj["verbose"] = verbose
    configure_logging(verbose)


def _register_commands() -> None:
    from es5guard.cli.build import build_check  # noqa: F811
    from es5guard.cli.check import check  # noqa: F811
    from es5guard.cli.rules import rules  # noqa: F811

    main.add_command(check)
    main.add_command(build_check)
    main.add_command(rules)


_register_commands()
