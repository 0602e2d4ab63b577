"""Allow-list of rule identifiers that indicate post-ES5 syntax."""

from __future__ import annotations

from dataclasses import dataclass

ES5_RULE_PREFIX = "es5/"

LEGACY_SYNTAX_RULES: frozenset[str] = frozenset(
    {
        # Arrow functions
        "arrow-body-style",
        "arrow-parens",
        "arrow-spacing",
        # Classes
        "no-class-assign",
        "no-dupe-class-members",
        "constructor-super",
        "no-this-before-super",
        "no-useless-constructor",
        # Template strings
        "no-template-curly-in-string",
        # eslint-plugin-es5
        "es5/no-arrow-functions",
        "es5/no-binary-and-octal-literals",
        "es5/no-block-scoping",
        "es5/no-classes",
        "es5/no-computed-properties",
        "es5/no-default-parameters",
        "es5/no-destructuring",
        "es5/no-exponentiation-operator",
        "es5/no-for-of",
        "es5/no-generators",
        "es5/no-modules",
        "es5/no-object-super",
        "es5/no-rest-parameters",
        "es5/no-shorthand-properties",
        "es5/no-spread",
        "es5/no-template-literals",
        "es5/no-typeof-symbol",
        "es5/no-unicode-code-point-escape",
        "es5/no-unicode-regex",
    }
)


@dataclass(frozen=True)
class RuleSet:
    """Exact rule ids plus one namespace prefix covering a whole rule family."""

    rules: frozenset[str] = LEGACY_SYNTAX_RULES
    prefix: str = ES5_RULE_PREFIX

    def matches(self, rule_id: str | None) -> bool:
        if not rule_id:
            return False
        return rule_id in self.rules or (bool(self.prefix) and rule_id.startswith(self.prefix))


DEFAULT_RULE_SET = RuleSet()


def is_legacy_syntax_rule(rule_id: str | None, rule_set: RuleSet = DEFAULT_RULE_SET) -> bool:
    """Check whether a diagnostic's rule id counts as a legacy-syntax violation."""
    return rule_set.matches(rule_id)
