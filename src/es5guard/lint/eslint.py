"""ESLint engine — runs the eslint CLI as a subprocess and parses its JSON report."""

from __future__ import annotations

import json
import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from es5guard.configs import bundled_parser
from es5guard.detector.base import LintConfig
from es5guard.detector.models import DiagnosticMessage, FileLintResult, RawLintReport
from es5guard.errors import CheckerIOError, ConfigError
from es5guard.output import render_stylish

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("npx", "--no-install", "eslint")

# eslint exit status: 0 clean, 1 lint errors, 2 configuration or internal failure
_OK_STATUSES = {0, 1}


class EslintEngine:
    """Lints files through the ``eslint`` command line.

    Runs in legacy eslintrc mode so that ``--config`` accepts ``.eslintrc``
    style files, with ``.eslintrc`` discovery and auto-fix disabled. Plugins
    and the parser of a bundled config resolve from the working directory,
    so the project's ``node_modules`` is used.
    """

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_COMMAND,
        cwd: str | Path | None = None,
    ) -> None:
        self._command = list(command)
        self._cwd = Path(cwd) if cwd is not None else None

    def load_config(self, config_path: Path) -> LintConfig:
        path = Path(config_path)
        if not path.is_absolute():
            path = (self._cwd or Path.cwd()) / path
        if not path.is_file():
            raise CheckerIOError(f"ESLint configuration not found: {path}")
        if not os.access(path, os.R_OK):
            raise CheckerIOError(f"ESLint configuration is not readable: {path}")
        resolved = path.resolve()
        return LintConfig(path=resolved, parser=bundled_parser(resolved))

    def lint_files(self, config: LintConfig, file_paths: Sequence[Path]) -> list[RawLintReport]:
        args = [
            *self._command,
            "--no-eslintrc",
            "--config",
            str(config.path),
            "--resolve-plugins-relative-to",
            str(self._cwd or Path.cwd()),
            "--format",
            "json",
        ]
        if config.parser:
            args += ["--parser", config.parser]
        args += [str(p) for p in file_paths]
        env = os.environ.copy()
        env["ESLINT_USE_FLAT_CONFIG"] = "false"
        logger.debug("Running %s", " ".join(args))

        try:
            proc = subprocess.run(
                args,
                cwd=self._cwd,
                env=env,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise ConfigError(f"ESLint executable not found: {self._command[0]}") from e
        except OSError as e:
            raise CheckerIOError(f"Cannot run {self._command[0]}: {e}") from e

        if proc.returncode not in _OK_STATUSES:
            stderr = (proc.stderr or "").strip()
            raise ConfigError(
                stderr or f"eslint exited with status {proc.returncode}"
            )

        try:
            payload = json.loads(proc.stdout or "[]")
        except json.JSONDecodeError as e:
            raise ConfigError(f"Unreadable eslint output: {e}") from e
        if not isinstance(payload, list):
            raise ConfigError("eslint JSON output must be a list of file results")

        return [_parse_report(item) for item in payload]

    def format(self, results: Sequence[FileLintResult]) -> str:
        return render_stylish(results)


def _parse_report(item: dict) -> RawLintReport:
    file_path = Path(item.get("filePath", ""))
    messages: list[DiagnosticMessage] = []
    for m in item.get("messages", []):
        if m.get("fatal"):
            logger.warning(
                "Parse error in %s:%s:%s: %s",
                file_path,
                m.get("line", 0),
                m.get("column", 0),
                m.get("message", ""),
            )
        messages.append(
            DiagnosticMessage(
                file_path=file_path,
                line=int(m.get("line") or 0),
                column=int(m.get("column") or 0),
                rule_id=m.get("ruleId"),
                message=m.get("message", ""),
            )
        )
    return RawLintReport(
        file_path=file_path,
        messages=messages,
        error_count=int(item.get("errorCount", 0)),
        warning_count=int(item.get("warningCount", 0)),
    )
