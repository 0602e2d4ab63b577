"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from es5guard.detector.base import LintConfig
from es5guard.detector.models import DiagnosticMessage, FileLintResult, RawLintReport
from es5guard.errors import ConfigError
from es5guard.output import render_stylish


class FakeEngine:
    """Scripted LintEngine: diagnostics keyed by file base name.

    Each scripted entry is ``(line, column, rule_id, message)``. Reported
    engine counts are deliberately inflated so tests catch any reuse.
    """

    def __init__(self) -> None:
        self.script: dict[str, list[tuple[int, int, str | None, str]]] = {}
        self.config_error: str | None = None
        self.reverse_order = False
        self.loaded: list[Path] = []
        self.lint_calls: list[list[Path]] = []

    def load_config(self, config_path: Path) -> LintConfig:
        self.loaded.append(Path(config_path))
        return LintConfig(path=Path(config_path))

    def lint_files(self, config: LintConfig, file_paths: Sequence[Path]) -> list[RawLintReport]:
        if self.config_error:
            raise ConfigError(self.config_error)
        self.lint_calls.append(list(file_paths))
        reports = []
        for path in file_paths:
            messages = [
                DiagnosticMessage(
                    file_path=path, line=line, column=column, rule_id=rule_id, message=message
                )
                for line, column, rule_id, message in self.script.get(path.name, [])
            ]
            reports.append(
                RawLintReport(
                    file_path=path,
                    messages=messages,
                    error_count=len(messages) + 100,
                    warning_count=7,
                )
            )
        if self.reverse_order:
            reports.reverse()
        return reports

    def format(self, results: Sequence[FileLintResult]) -> str:
        return render_stylish(results)


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def js_dir(tmp_path: Path) -> Path:
    """A build output directory with two small scripts and a source map."""
    (tmp_path / "main.js").write_text(
        "var a = 1;\n"
        "var b = 2;\n"
        "var f = () => a + b;\n"
        "var c = 3;\n"
        "var d = 4;\n"
    )
    (tmp_path / "vendor.js").write_text("var v = 'vendor';\n")
    (tmp_path / "main.js.map").write_text("{}\n")
    return tmp_path
