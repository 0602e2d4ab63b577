"""LintEngine protocol — the detector's only view of the external linter."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from es5guard.detector.models import FileLintResult, RawLintReport


@dataclass(frozen=True)
class LintConfig:
    """A rule configuration the engine has accepted."""

    path: Path
    parser: str | None = None


@runtime_checkable
class LintEngine(Protocol):
    """Protocol for static-analysis engines."""

    def load_config(self, config_path: Path) -> LintConfig:
        """Resolve a rule configuration. Raises CheckerIOError if unreadable."""
        ...

    def lint_files(self, config: LintConfig, file_paths: Sequence[Path]) -> list[RawLintReport]:
        """Lint files with rules on and auto-fix off. Raises ConfigError on a bad rule set."""
        ...

    def format(self, results: Sequence[FileLintResult]) -> str:
        """Render results as human-readable text."""
        ...
