"""CLI command: es5guard rules — list the rule ids treated as legacy syntax."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from es5guard.detector.rules import DEFAULT_RULE_SET

console = Console()


@click.command()
def rules() -> None:
    """List rule ids whose diagnostics count as ES2015+ syntax."""
    table = Table(title="Legacy syntax rules", show_lines=False)
    table.add_column("Rule", style="cyan")
    table.add_column("Match", justify="right")

    for rule_id in sorted(DEFAULT_RULE_SET.rules):
        table.add_row(rule_id, "exact")
    table.add_row(f"{DEFAULT_RULE_SET.prefix}*", "prefix")

    console.print(table)
