"""Rule Evaluation System

Rules describe constraints; handlers evaluate them; the validator runs the
conditional gate and aggregates per-attribute messages.

Key Features:
- Immutable rules with shared conditional flags (when, skip_on_empty, skip_on_error)
- One handler per rule variant, resolved through a registry
- Order-preserving, append-only results keyed by attribute
- Message templates with named {placeholders}

Usage:
    from rulecheck.core.validation import Validator
    from rulecheck.rules import IsTrue, Url

    result = Validator().validate(
        {"terms": "1", "site": "https://example.com"},
        {"terms": IsTrue(), "site": [Url(skip_on_empty=True)]},
    )
    assert result.is_valid
"""

from .formatter import MessageFormatter, stringify, type_name
from .coercion import loose_equals, is_numeric, to_number
from .context import ValidationContext
from .data_set import (
    DataSet,
    SingleValueDataSet,
    MappingDataSet,
    ObjectDataSet,
    create_data_set,
)
from .empty import WhenEmpty, WhenNull, WhenMissing, is_empty
from .result import ValidationResult, ValidationErrorDetail, ValidationError
from .rule import Rule, RuleHandler
from .resolver import HandlerResolver
from .validator import Validator, RuleSet, normalize_rules

__all__ = [
    # Formatting
    "MessageFormatter",
    "stringify",
    "type_name",
    # Coercion
    "loose_equals",
    "is_numeric",
    "to_number",
    # Context and data
    "ValidationContext",
    "DataSet",
    "SingleValueDataSet",
    "MappingDataSet",
    "ObjectDataSet",
    "create_data_set",
    # Empty policies
    "WhenEmpty",
    "WhenNull",
    "WhenMissing",
    "is_empty",
    # Results
    "ValidationResult",
    "ValidationErrorDetail",
    "ValidationError",
    # Protocol
    "Rule",
    "RuleHandler",
    "HandlerResolver",
    "Validator",
    "RuleSet",
    "normalize_rules",
]
