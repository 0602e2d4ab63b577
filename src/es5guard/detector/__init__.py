"""Legacy-syntax detector — filters lint diagnostics down to ES2015+ syntax rules."""

from es5guard.detector.engine import DetectorOptions, detect
from es5guard.detector.models import (
    AggregateResult,
    DiagnosticMessage,
    FileLintResult,
    RawLintReport,
)
from es5guard.detector.rules import DEFAULT_RULE_SET, RuleSet, is_legacy_syntax_rule

__all__ = [
    "DEFAULT_RULE_SET",
    "AggregateResult",
    "DetectorOptions",
    "DiagnosticMessage",
    "FileLintResult",
    "RawLintReport",
    "RuleSet",
    "detect",
    "is_legacy_syntax_rule",
]
