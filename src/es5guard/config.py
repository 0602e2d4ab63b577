"""Settings — defaults, environment variables and an optional YAML file."""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from es5guard.build.adapter import HookConfig
from es5guard.detector.engine import DetectorOptions
from es5guard.errors import CheckerIOError, ConfigError
from es5guard.files import DEFAULT_PATTERN
from es5guard.lint.eslint import DEFAULT_COMMAND, EslintEngine

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = ".es5guard.yaml"

_KNOWN_KEYS = {"config", "fail_on_error", "exclude", "pattern", "eslint_command"}
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Es5GuardConfig:
    """Application-wide settings."""

    config_path: Path | None = None
    fail_on_error: bool = False
    exclude_patterns: list[str] = field(default_factory=list)
    pattern: str = DEFAULT_PATTERN
    eslint_command: list[str] = field(default_factory=lambda: list(DEFAULT_COMMAND))
    source: str | None = None

    @classmethod
    def load(cls, settings_path: str | Path | None = None) -> Es5GuardConfig:
        """Load settings from a YAML file, then apply environment overrides.

        Without an explicit path, ``.es5guard.yaml`` in the current
        directory is used when it exists.
        """
        config = cls()

        path = Path(settings_path) if settings_path else Path(DEFAULT_SETTINGS_FILE)
        if path.is_file():
            config._apply_file(path)
        elif settings_path:
            raise CheckerIOError(f"Settings file not found: {path}")

        env_config = os.environ.get("ES5GUARD_CONFIG")
        if env_config:
            config.config_path = Path(env_config)

        env_fail = os.environ.get("ES5GUARD_FAIL_ON_ERROR")
        if env_fail:
            config.fail_on_error = env_fail.strip().lower() in _TRUE_VALUES

        env_eslint = os.environ.get("ES5GUARD_ESLINT")
        if env_eslint:
            config.eslint_command = shlex.split(env_eslint)

        return config

    def _apply_file(self, path: Path) -> None:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            raise CheckerIOError(f"Cannot read settings file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Settings in {path} must be a mapping")
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown settings in {path}: {', '.join(sorted(unknown))}")

        if data.get("config"):
            config_path = Path(data["config"])
            if not config_path.is_absolute():
                config_path = path.parent / config_path
            self.config_path = config_path
        if "fail_on_error" in data:
            self.fail_on_error = bool(data["fail_on_error"])
        exclude = data.get("exclude", [])
        if isinstance(exclude, str):
            exclude = [exclude]
        self.exclude_patterns = [str(p) for p in exclude]
        if data.get("pattern"):
            self.pattern = str(data["pattern"])
        command = data.get("eslint_command")
        if command:
            self.eslint_command = shlex.split(command) if isinstance(command, str) else list(command)

        self.source = str(path)
        logger.debug("Loaded settings from %s", path)

    def detector_options(self, verbose: bool = True) -> DetectorOptions:
        return DetectorOptions(config_path=self.config_path, verbose=verbose)

    def hook_config(self) -> HookConfig:
        return HookConfig(
            config_path=self.config_path,
            fail_on_error=self.fail_on_error,
            exclude_patterns=tuple(self.exclude_patterns),
        )

    def engine(self) -> EslintEngine:
        return EslintEngine(command=self.eslint_command)
