"""rulecheck: declarative value validation.

Attach rules to a value or to named attributes of structured input; each rule
is evaluated by its handler and the messages are collected per attribute.

Usage:
    from rulecheck import Validator, IsTrue, Url

    result = Validator().validate({"terms": "0"}, {"terms": IsTrue()})
    result.get_error_messages_indexed_by_attribute()
    # {'terms': ['The value must be "1".']}
"""

from rulecheck.core.validation import (
    HandlerResolver,
    MessageFormatter,
    Rule,
    RuleHandler,
    ValidationContext,
    ValidationError,
    ValidationErrorDetail,
    ValidationResult,
    Validator,
    WhenEmpty,
    WhenMissing,
    WhenNull,
)
from rulecheck.rules import IsTrue, Length, Number, Url

__version__ = "0.1.0"

__all__ = [
    "HandlerResolver",
    "MessageFormatter",
    "Rule",
    "RuleHandler",
    "ValidationContext",
    "ValidationError",
    "ValidationErrorDetail",
    "ValidationResult",
    "Validator",
    "WhenEmpty",
    "WhenMissing",
    "WhenNull",
    "IsTrue",
    "Length",
    "Number",
    "Url",
]
