"""IsTrue: the value must equal a configured "true" value."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rulecheck.core.validation import ValidationContext, ValidationResult
from rulecheck.core.validation.coercion import loose_equals
from rulecheck.core.validation.formatter import is_composite, type_name
from rulecheck.core.validation.rule import Rule, RuleHandler, attribute_of


@dataclass(frozen=True, slots=True)
class IsTrue(Rule):
    """Checks that the value equals ``true_value``.

    - strict: same type and value (``"1"`` does not match ``True``)
    - non-strict: the loose equality table of ``coercion.loose_equals``, so
      ``"1"``, ``1``, ``"01"`` and ``True`` all match the default ``"1"``

    Messages:
    - message_with_type: composite input (list, dict, object); ``{attribute}``, ``{true}``, ``{type}``
    - message_with_value: scalar or None input; ``{attribute}``, ``{true}``, ``{value}``
    """
    true_value: Any = "1"
    strict: bool = False
    message_with_type: str = 'The value must be "{true}".'
    message_with_value: str = 'The value must be "{true}".'

    def get_handler(self) -> type[IsTrueHandler]:
        return IsTrueHandler

    def get_options(self) -> dict[str, Any]:
        return {
            "true_value": self.true_value,
            "strict": self.strict,
            "message_with_type": self.message_option(self.message_with_type, true=self.true_value),
            "message_with_value": self.message_option(self.message_with_value, true=self.true_value),
            **super(IsTrue, self).get_options(),
        }


class IsTrueHandler(RuleHandler):
    rule_type = IsTrue

    def check(self, value: Any, rule: IsTrue, context: ValidationContext) -> ValidationResult:
        if self._matches(value, rule): return ValidationResult()

        if is_composite(value):
            return self.fail(rule, rule.message_with_type,
                attribute=attribute_of(context), true=rule.true_value, type=type_name(value))
        return self.fail(rule, rule.message_with_value,
            attribute=attribute_of(context), true=rule.true_value, value=value)

    @staticmethod
    def _matches(value: Any, rule: IsTrue) -> bool:
        if rule.strict:
            return type(value) is type(rule.true_value) and value == rule.true_value
        return loose_equals(value, rule.true_value)
