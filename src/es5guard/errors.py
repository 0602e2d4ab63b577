"""Exception hierarchy.

Detected legacy-syntax violations are a normal result and never raise.
These exceptions mean the checker itself could not run.
"""

from __future__ import annotations


class Es5GuardError(Exception):
    """Base class for all es5guard failures."""


class UsageError(Es5GuardError):
    """Bad command-line input: no paths given or nothing left to check."""


class ConfigError(Es5GuardError):
    """The lint engine could not build a rule set from the configuration."""


class CheckerIOError(Es5GuardError, OSError):
    """A file or configuration resource could not be read."""
