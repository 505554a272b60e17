"""Length: string length constraints."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rulecheck.core.validation import ValidationContext, ValidationResult
from rulecheck.core.validation.formatter import type_name
from rulecheck.core.validation.rule import Rule, RuleHandler, attribute_of


@dataclass(frozen=True, slots=True)
class Length(Rule):
    """Validate string length (in characters).

    Either ``exactly`` or any of ``min``/``max`` may be set, not both.

    Message placeholders:
    - incorrect_input_message: ``{attribute}``, ``{type}``
    - too_short/too_long/not_exactly: ``{attribute}``, ``{value}``, ``{length}`` and ``{min}``/``{max}``/``{exactly}``
    """
    min: int | None = None
    max: int | None = None
    exactly: int | None = None
    incorrect_input_message: str = "This value must be a string."
    too_short_message: str = "This value must contain at least {min} characters."
    too_long_message: str = "This value must contain at most {max} characters."
    not_exactly_message: str = "This value must contain exactly {exactly} characters."

    def __post_init__(self):
        if self.exactly is not None and (self.min is not None or self.max is not None):
            raise ValueError("Length accepts either 'exactly' or 'min'/'max', not both")
        if self.exactly is None and self.min is None and self.max is None:
            raise ValueError("Length requires at least one of 'min', 'max' or 'exactly'")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"Length 'min' ({self.min}) is greater than 'max' ({self.max})")

    def get_handler(self) -> type[LengthHandler]:
        return LengthHandler

    def get_options(self) -> dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "exactly": self.exactly,
            "incorrect_input_message": self.message_option(self.incorrect_input_message),
            "too_short_message": self.message_option(self.too_short_message, min=self.min),
            "too_long_message": self.message_option(self.too_long_message, max=self.max),
            "not_exactly_message": self.message_option(self.not_exactly_message, exactly=self.exactly),
            **super(Length, self).get_options(),
        }


class LengthHandler(RuleHandler):
    rule_type = Length

    def check(self, value: Any, rule: Length, context: ValidationContext) -> ValidationResult:
        attribute = attribute_of(context)
        if not isinstance(value, str):
            return self.fail(rule, rule.incorrect_input_message, attribute=attribute, type=type_name(value))

        length = len(value)

        if rule.exactly is not None and length != rule.exactly:
            return self.fail(rule, rule.not_exactly_message, attribute=attribute, value=value, length=length,
                exactly=rule.exactly)

        if rule.min is not None and length < rule.min:
            return self.fail(rule, rule.too_short_message, attribute=attribute, value=value, length=length,
                min=rule.min)

        if rule.max is not None and length > rule.max:
            return self.fail(rule, rule.too_long_message, attribute=attribute, value=value, length=length,
                max=rule.max)

        return ValidationResult()
