"""Post-build hook — run the detector over a build's emitted scripts."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from es5guard.build.models import Compilation
from es5guard.detector.base import LintEngine
from es5guard.detector.engine import DetectorOptions, detect
from es5guard.errors import Es5GuardError
from es5guard.files import compile_patterns, is_excluded

logger = logging.getLogger(__name__)

NO_FILES_MESSAGE = "[ES5CheckPlugin] No JS files found, check the build output configuration"
ALL_EXCLUDED_MESSAGE = (
    "[ES5CheckPlugin] No JS files found, all emitted scripts match exclude patterns: {patterns}"
)


class HookState(enum.Enum):
    """Where a hook run currently is. Returns to IDLE after every build."""

    IDLE = "idle"
    COLLECTING = "collecting"
    FILTERING = "filtering"
    SKIPPED = "skipped"
    DETECTING = "detecting"
    REPORTING = "reporting"


@dataclass(frozen=True)
class HookConfig:
    """Hook settings. ``config_path=None`` uses the bundled strict config."""

    config_path: Path | None = None
    fail_on_error: bool = False
    exclude_patterns: tuple[str, ...] = ()
    extension: str = ".js"


class Es5CheckHook:
    """Checks emitted scripts for legacy syntax once a build has completed.

    Violations become one build warning, or one build error when
    ``fail_on_error`` is set. Detector failures (bad configuration,
    unreadable files) are always build errors.
    """

    def __init__(
        self,
        config: HookConfig | None = None,
        *,
        engine: LintEngine | None = None,
        console: Console | None = None,
    ) -> None:
        self._config = config or HookConfig()
        self._engine = engine
        self._console = console or Console()
        self.state = HookState.IDLE
        self.transitions: list[HookState] = []

    @property
    def config(self) -> HookConfig:
        return self._config

    def apply(self, compilation: Compilation) -> None:
        """Run against a compilation's own output path and assets."""
        self.on_build_complete(compilation.output_path, compilation.assets, compilation)

    def on_build_complete(
        self,
        output_directory: str | Path,
        emitted_asset_names: Sequence[str],
        compilation: Compilation,
    ) -> None:
        self.transitions = []
        self._console.print(
            "\n[ES5CheckPlugin] Checking build output for ES2015+ syntax...",
            markup=False,
        )
        try:
            self._enter(HookState.COLLECTING)
            candidates = self._collect(Path(output_directory), emitted_asset_names)

            self._enter(HookState.FILTERING)
            try:
                excludes = compile_patterns(self._config.exclude_patterns)
            except Es5GuardError as e:
                self._fail(compilation, e)
                return
            files = [p for p in candidates if not is_excluded(p.name, excludes)]

            if not files:
                self._enter(HookState.SKIPPED)
                logger.warning("No files to check in %s", output_directory)
                if candidates:
                    message = ALL_EXCLUDED_MESSAGE.format(
                        patterns=", ".join(self._config.exclude_patterns)
                    )
                else:
                    message = NO_FILES_MESSAGE
                self._console.print(message, style="red", markup=False)
                compilation.warnings.append(RuntimeError(message))
                return

            self._console.print(
                f"[ES5CheckPlugin] Found {len(files)} JS file(s) to check:", markup=False
            )
            for path in files:
                self._console.print(f"[ES5CheckPlugin] - {path.name}", markup=False)

            self._enter(HookState.DETECTING)
            try:
                result = detect(
                    files,
                    DetectorOptions(config_path=self._config.config_path, verbose=True),
                    engine=self._engine,
                    console=self._console,
                )
            except Es5GuardError as e:
                self._fail(compilation, e)
                return

            self._enter(HookState.REPORTING)
            if result.has_errors:
                issue = RuntimeError(
                    f"Build output contains {result.total_errors} ES2015+ syntax error(s)"
                )
                if self._config.fail_on_error:
                    compilation.errors.append(issue)
                else:
                    compilation.warnings.append(issue)
            else:
                self._console.print(
                    "[ES5CheckPlugin] Check passed! All files are valid ES5.",
                    style="green",
                    markup=False,
                )
        finally:
            self.state = HookState.IDLE

    def _enter(self, state: HookState) -> None:
        self.state = state
        self.transitions.append(state)

    def _fail(self, compilation: Compilation, error: Es5GuardError) -> None:
        self._enter(HookState.REPORTING)
        logger.error("ES5 check failed: %s", error)
        self._console.print(
            f"[ES5CheckPlugin] Error while checking: {error}", style="red", markup=False
        )
        compilation.errors.append(error)

    def _collect(self, output_directory: Path, asset_names: Sequence[str]) -> list[Path]:
        files: list[Path] = []
        for name in asset_names:
            if not name.endswith(self._config.extension):
                continue
            path = output_directory / name
            if path.exists():
                files.append(path)
            else:
                logger.debug("Emitted asset missing on disk: %s", path)
        return files
