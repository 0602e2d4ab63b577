"""Detector — lint files once and keep only legacy-syntax diagnostics."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from es5guard.configs import bundled_config_path
from es5guard.detector.base import LintEngine
from es5guard.detector.models import AggregateResult, FileLintResult, RawLintReport
from es5guard.detector.rules import DEFAULT_RULE_SET, RuleSet
from es5guard.errors import CheckerIOError
from es5guard.lint.eslint import EslintEngine
from es5guard.output import TAG, print_details, print_sizes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectorOptions:
    """Per-run detector settings. ``config_path=None`` uses the bundled strict config."""

    config_path: Path | None = None
    verbose: bool = True
    rule_set: RuleSet = DEFAULT_RULE_SET


def detect(
    file_paths: Sequence[str | Path],
    options: DetectorOptions | None = None,
    *,
    engine: LintEngine | None = None,
    console: Console | None = None,
) -> AggregateResult:
    """Check files for post-ES5 syntax.

    Finding violations is a normal result reported through
    ``AggregateResult.has_errors``. Raises CheckerIOError or ConfigError
    only when the check itself cannot run.
    """
    paths = [Path(os.path.abspath(p)) for p in file_paths]
    if not paths:
        raise CheckerIOError("No files to check")

    options = options or DetectorOptions()
    engine = engine if engine is not None else EslintEngine()
    console = console or Console()

    config = engine.load_config(options.config_path or bundled_config_path())
    logger.debug("Linting %d file(s) with %s", len(paths), config.path)
    reports = engine.lint_files(config, paths)

    results = _filter_reports(paths, reports, options.rule_set)
    aggregate = AggregateResult(results=results)

    if aggregate.has_errors:
        console.print(f"{TAG} Legacy syntax detected:", style="bold red", markup=False)
        console.print(engine.format(results), markup=False, highlight=False, soft_wrap=True)
        if options.verbose:
            console.print(f"\n{TAG} Details:", markup=False)
            for result in results:
                if result.error_count:
                    print_details(console, result, _read_lines(result.file_path))
    else:
        console.print(
            f"{TAG} Check passed! No legacy syntax found.", style="green", markup=False
        )

    print_sizes(console, [(p, _file_size(p)) for p in paths])
    return aggregate


def _filter_reports(
    paths: Sequence[Path],
    reports: Sequence[RawLintReport],
    rule_set: RuleSet,
) -> list[FileLintResult]:
    """Build one result per input path, keeping only allow-listed diagnostics."""
    by_path: dict[Path, RawLintReport] = {}
    for report in reports:
        by_path.setdefault(Path(os.path.abspath(report.file_path)), report)

    results: list[FileLintResult] = []
    for path in paths:
        report = by_path.get(path)
        if report is None:
            logger.debug("No lint report for %s", path)
            results.append(FileLintResult(file_path=path))
            continue
        kept = [m for m in report.messages if rule_set.matches(m.rule_id)]
        if len(kept) != len(report.messages):
            logger.debug(
                "%s: kept %d of %d diagnostics",
                path,
                len(kept),
                len(report.messages),
            )
        results.append(FileLintResult(file_path=path, messages=kept))
    return results


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace").split("\n")
    except OSError as e:
        raise CheckerIOError(f"Cannot read {path}: {e}") from e


def _file_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except OSError as e:
        raise CheckerIOError(f"Cannot stat {path}: {e}") from e
