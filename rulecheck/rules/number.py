"""Number: numeric value with optional range."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rulecheck.core.validation import ValidationContext, ValidationResult
from rulecheck.core.validation.coercion import is_integer_string, is_number, is_numeric, to_number
from rulecheck.core.validation.rule import Rule, RuleHandler, attribute_of


@dataclass(frozen=True, slots=True)
class Number(Rule):
    """Validate that the value is a number within ``[min, max]``.

    Accepts int, float, Decimal and numeric strings (``"42"``, ``" 1.5 "``,
    ``"1e3"``); bool is never a number. With ``as_integer`` only whole
    numbers are accepted (``2.0`` is accepted, ``"2.0"`` is not).

    Message placeholders: ``{attribute}``, ``{value}`` and ``{min}``/``{max}``
    for the range messages.
    """
    min: int | float | None = None
    max: int | float | None = None
    as_integer: bool = False
    incorrect_input_message: str | None = None
    too_small_message: str = "Value must be no less than {min}."
    too_big_message: str = "Value must be no greater than {max}."

    def __post_init__(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"Number 'min' ({self.min}) is greater than 'max' ({self.max})")

    def get_incorrect_input_message(self) -> str:
        if self.incorrect_input_message is not None: return self.incorrect_input_message
        return "Value must be an integer." if self.as_integer else "Value must be a number."

    def get_handler(self) -> type[NumberHandler]:
        return NumberHandler

    def get_options(self) -> dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "as_integer": self.as_integer,
            "incorrect_input_message": self.message_option(self.get_incorrect_input_message()),
            "too_small_message": self.message_option(self.too_small_message, min=self.min),
            "too_big_message": self.message_option(self.too_big_message, max=self.max),
            **super(Number, self).get_options(),
        }


class NumberHandler(RuleHandler):
    rule_type = Number

    def check(self, value: Any, rule: Number, context: ValidationContext) -> ValidationResult:
        attribute = attribute_of(context)
        if not self._accepts(value, rule):
            return self.fail(rule, rule.get_incorrect_input_message(), attribute=attribute, value=value)

        num = to_number(value)

        if rule.min is not None and num < rule.min:
            return self.fail(rule, rule.too_small_message, attribute=attribute, value=value, min=rule.min)

        if rule.max is not None and num > rule.max:
            return self.fail(rule, rule.too_big_message, attribute=attribute, value=value, max=rule.max)

        return ValidationResult()

    @staticmethod
    def _accepts(value: Any, rule: Number) -> bool:
        if not is_numeric(value): return False
        if not rule.as_integer: return True
        if is_number(value): return float(value).is_integer()
        return is_integer_string(value)
