"""Locate script files to check, on disk and from command-line arguments."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from es5guard.errors import ConfigError, UsageError

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.js"


def compile_patterns(patterns: Iterable[str | re.Pattern]) -> list[re.Pattern]:
    """Compile exclude regexes, raising ConfigError for an invalid one."""
    compiled: list[re.Pattern] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ConfigError(f"Invalid exclude pattern {pattern!r}: {e}") from e
    return compiled


def is_excluded(name: str, exclude_patterns: Iterable[str | re.Pattern]) -> bool:
    """Check a base filename against exclude regexes (search, not full match)."""
    return any(p.search(name) for p in compile_patterns(exclude_patterns))


def find_script_files(
    root: str | Path,
    pattern: str = DEFAULT_PATTERN,
    exclude_patterns: Sequence[str | re.Pattern] = (),
) -> list[Path]:
    """Return sorted absolute paths of files under ``root`` matching ``pattern``."""
    root = Path(root).resolve()
    excludes = compile_patterns(exclude_patterns)
    found: list[Path] = []
    for path in root.glob(pattern):
        if not path.is_file():
            continue
        if is_excluded(path.name, excludes):
            logger.debug("Excluding %s", path)
            continue
        found.append(path)
    return sorted(found)


def expand_paths(
    paths: Sequence[str | Path],
    *,
    pattern: str = DEFAULT_PATTERN,
    exclude_patterns: Sequence[str] = (),
    console: Console | None = None,
) -> list[Path]:
    """Turn file and directory arguments into a flat file list.

    Missing paths are reported and skipped. Raises UsageError when no
    arguments were given, an exclude pattern is invalid or no files remain.
    """
    if not paths:
        raise UsageError("No files or directories specified")
    try:
        excludes = compile_patterns(exclude_patterns)
    except ConfigError as e:
        raise UsageError(str(e)) from e

    err = console or Console(stderr=True)
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(find_script_files(path, pattern, excludes))
        elif path.exists():
            files.append(path)
        else:
            err.print(f"[red]File or directory does not exist:[/red] {escape(str(path))}")

    if not files:
        raise UsageError("No JS files found")
    return files
