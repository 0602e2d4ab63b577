"""CLI command: es5guard build-check OUTPUT_DIR [ASSET...] — run the post-build hook."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from es5guard.build.adapter import Es5CheckHook, HookConfig
from es5guard.build.models import Compilation
from es5guard.config import Es5GuardConfig
from es5guard.errors import Es5GuardError

console = Console()
err_console = Console(stderr=True)


@click.command("build-check")
@click.argument("output_dir", type=click.Path(exists=True, file_okay=False))
@click.argument("assets", nargs=-1)
@click.option("--config", "config_file", type=click.Path(), help="ESLint configuration file.")
@click.option(
    "--fail-on-error/--no-fail-on-error",
    default=None,
    help="Treat legacy syntax as a build error instead of a warning.",
)
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="Regex for emitted file names to skip.",
)
@click.pass_context
def build_check(
    ctx: click.Context,
    output_dir: str,
    assets: tuple[str, ...],
    config_file: str | None,
    fail_on_error: bool | None,
    exclude: tuple[str, ...],
) -> None:
    """Check a build's emitted assets the way the post-build hook does.

    ASSETS are names relative to OUTPUT_DIR; every file under it is used
    when none are given.
    """
    obj = ctx.obj or {}
    try:
        settings = Es5GuardConfig.load(obj.get("settings_path"))
    except Es5GuardError as e:
        err_console.print(f"[red]Error loading settings:[/red] {escape(str(e))}")
        sys.exit(1)

    root = Path(output_dir).resolve()
    asset_names = list(assets) or _list_assets(root)
    hook_config = HookConfig(
        config_path=Path(config_file) if config_file else settings.config_path,
        fail_on_error=settings.fail_on_error if fail_on_error is None else fail_on_error,
        exclude_patterns=tuple(exclude) or tuple(settings.exclude_patterns),
    )

    compilation = Compilation(output_path=root, assets=asset_names)
    hook = Es5CheckHook(hook_config, engine=settings.engine(), console=console)
    hook.apply(compilation)

    for warning in compilation.warnings:
        err_console.print(f"[yellow]WARNING:[/yellow] {escape(str(warning))}")
    for error in compilation.errors:
        err_console.print(f"[red]ERROR:[/red] {escape(str(error))}")

    if compilation.failed:
        sys.exit(1)


def _list_assets(root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
