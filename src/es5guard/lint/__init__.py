"""Lint engine implementations."""

from es5guard.lint.eslint import EslintEngine

__all__ = ["EslintEngine"]
