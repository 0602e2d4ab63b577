"""Detector data models — diagnostics and per-file/aggregate results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DiagnosticMessage:
    """One reported rule violation. Line and column are 1-based."""

    file_path: Path
    line: int
    column: int
    rule_id: str | None
    message: str


@dataclass
class RawLintReport:
    """Unfiltered engine output for a single file.

    The counts are the engine's own and cover every rule in the
    configuration, so the detector never uses them.
    """

    file_path: Path
    messages: list[DiagnosticMessage] = field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0


@dataclass
class FileLintResult:
    """Allow-listed diagnostics for one file, in engine order."""

    file_path: Path
    messages: list[DiagnosticMessage] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.messages)


@dataclass
class AggregateResult:
    """Outcome of one detection run, one result per input file."""

    results: list[FileLintResult] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(r.error_count > 0 for r in self.results)

    @property
    def total_errors(self) -> int:
        return sum(r.error_count for r in self.results)
