"""CLI command: es5-check [--config FILE] [--no-details] PATH... — standalone checker."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from es5guard.config import Es5GuardConfig
from es5guard.detector.engine import DetectorOptions, detect
from es5guard.errors import Es5GuardError, UsageError
from es5guard.files import expand_paths

console = Console()
err_console = Console(stderr=True)

USAGE = "Usage: es5-check [--config <file>] [--no-details] <file-or-directory>..."


@click.command()
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--config",
    "config_file",
    type=click.Path(),
    help="ESLint configuration file (default: bundled strict ES5 config).",
)
@click.option("--no-details", is_flag=True, help="Do not show source context for each error.")
@click.option("--pattern", default=None, help="Glob used to find files in directories.")
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="Regex for file names to skip inside directories.",
)
@click.pass_context
def check(
    ctx: click.Context,
    paths: tuple[str, ...],
    config_file: str | None,
    no_details: bool,
    pattern: str | None,
    exclude: tuple[str, ...],
) -> None:
    """Check JS files or directories for ES2015+ syntax.

    Exits 0 when no legacy syntax is found and 1 when violations are found
    or the check could not run.
    """
    obj = ctx.obj or {}
    try:
        settings = Es5GuardConfig.load(obj.get("settings_path"))
        files = expand_paths(
            paths,
            pattern=pattern or settings.pattern,
            exclude_patterns=list(exclude) or settings.exclude_patterns,
            console=err_console,
        )
    except UsageError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        err_console.print(USAGE, markup=False)
        err_console.print("Use --help for more information.")
        sys.exit(1)
    except Es5GuardError as e:
        err_console.print(f"[red]Error loading settings:[/red] {escape(str(e))}")
        sys.exit(1)

    options = DetectorOptions(
        config_path=Path(config_file) if config_file else settings.config_path,
        verbose=not no_details,
    )
    try:
        result = detect(files, options, engine=settings.engine(), console=console)
    except Es5GuardError as e:
        err_console.print(f"[red]Error during check:[/red] {escape(str(e))}")
        sys.exit(1)

    if result.has_errors:
        sys.exit(1)


def main() -> None:
    """Console script entrypoint for ``es5-check``."""
    from es5guard.cli import configure_logging

    configure_logging(verbose=False)
    check(prog_name="es5-check")
