"""Bundled ESLint rule configurations."""

from __future__ import annotations

import importlib.resources
from pathlib import Path

STRICT_CONFIG = "eslintrc.dist.js"

# Parsers named inside a config file resolve relative to that file, which for
# bundled configs is site-packages, so the parser is passed on the command line.
BUNDLED_PARSERS = {STRICT_CONFIG: "@babel/eslint-parser"}


def bundled_config_path(name: str = STRICT_CONFIG) -> Path:
    """Return the filesystem path of a bundled configuration."""
    resource = importlib.resources.files("es5guard.configs").joinpath(name)
    return Path(str(resource))


def bundled_parser(config_path: Path) -> str | None:
    """Return the parser to pass for a bundled configuration, if it is one."""
    resolved = Path(config_path).resolve()
    for name, parser in BUNDLED_PARSERS.items():
        if resolved == bundled_config_path(name).resolve():
            return parser
    return None
