"""Console rendering — stylish summaries, source context and size reports."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from es5guard.detector.models import DiagnosticMessage, FileLintResult

CONTEXT_RADIUS = 2
TAG = "[ES5Check]"


def render_stylish(results: Sequence[FileLintResult]) -> str:
    """Render results the way ESLint's ``stylish`` formatter does."""
    lines: list[str] = []
    total = 0
    for result in results:
        if not result.messages:
            continue
        lines.append(str(result.file_path))
        rows = [
            (f"{m.line}:{m.column}", m.message, m.rule_id or "")
            for m in result.messages
        ]
        pos_width = max(len(r[0]) for r in rows)
        msg_width = max(len(r[1]) for r in rows)
        for pos, message, rule_id in rows:
            lines.append(
                f"  {pos.ljust(pos_width)}  error  {message.ljust(msg_width)}  {rule_id}".rstrip()
            )
        lines.append("")
        total += result.error_count

    if total == 0:
        return ""
    noun = "problem" if total == 1 else "problems"
    lines.append(f"✖ {total} {noun} ({total} error{'s' if total != 1 else ''}, 0 warnings)")
    return "\n".join(lines)


def context_lines(
    source: Sequence[str],
    line: int,
    column: int,
    radius: int = CONTEXT_RADIUS,
) -> list[str]:
    """Return the lines around ``line`` with a ``^`` pointer under ``column``.

    The offending line is prefixed with ``>``, others with two spaces.
    """
    start = max(1, line - radius)
    end = min(len(source), line + radius)
    out: list[str] = []
    for number in range(start, end + 1):
        marker = "> " if number == line else "  "
        prefix = f"{marker}{number}: "
        out.append(f"{prefix}{source[number - 1]}")
        if number == line:
            out.append(" " * (len(prefix) + max(column, 1) - 1) + "^")
    return out


def print_details(console: Console, result: FileLintResult, source: Sequence[str]) -> None:
    """Print every diagnostic of a file with its surrounding source."""
    console.print(f"\nFile: [cyan]{escape(str(result.file_path))}[/cyan]")
    for msg in result.messages:
        _print_message(console, msg, source)


def _print_message(console: Console, msg: DiagnosticMessage, source: Sequence[str]) -> None:
    console.print(
        f"\nLine {msg.line}, column {msg.column}: {escape(msg.message)} "
        f"[dim]({escape(msg.rule_id or '')})[/dim]",
        soft_wrap=True,
    )
    for text in context_lines(source, msg.line, msg.column):
        style = "bold red" if text.startswith(">") or text.strip() == "^" else None
        console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def print_sizes(console: Console, sizes: Sequence[tuple[Path, int]]) -> None:
    """Print each file's size and the total, in KB."""
    total = 0
    for path, size in sizes:
        total += size
        console.print(f"{TAG} {path.name}: {size / 1024:.2f} KB", markup=False, highlight=False)
    console.print(f"{TAG} Total size: {total / 1024:.2f} KB", markup=False, highlight=False)
