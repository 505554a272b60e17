"""Rule / Handler Protocol

A rule is immutable configuration: constraint parameters, message templates
and the conditional-execution flags shared by every rule. A handler holds the
logic that decides pass/fail for one rule variant.

Features:
- Frozen dataclass rules, safe to share across runs and threads
- Conditional flags declared once on the Rule base and inherited
- Each rule declares its handler; handlers reject rules of other variants
- Rule options export for introspection and documentation
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from rulecheck.core.errors import UnexpectedRuleError
from .empty import SkipOnEmpty
from .formatter import MessageFormatter, stringify
from .result import ValidationResult

if TYPE_CHECKING:
    from .context import ValidationContext

WhenCallable = Callable[[Any, "ValidationContext"], bool]


@dataclass(frozen=True, slots=True, kw_only=True)
class Rule(ABC):
    """Base class for rules.

    Conditional flags, evaluated by the validator before the handler runs:
    - when: predicate ``(value, context) -> bool``; the rule is skipped when it returns False
    - skip_on_empty: bool or policy ``(value, is_missing) -> bool``; None inherits the validator default
    - skip_on_error: skip when the attribute already has an error from an earlier rule
    """
    skip_on_empty: SkipOnEmpty = None
    skip_on_error: bool = False
    when: WhenCallable | None = None

    def get_name(self) -> str:
        """Rule name: the class name with a lowercase first letter."""
        name = type(self).__name__
        return name[:1].lower() + name[1:]

    @abstractmethod
    def get_handler(self) -> type[RuleHandler] | RuleHandler:
        """Handler class (or a ready instance) that processes this rule."""

    def get_options(self) -> dict[str, Any]:
        """Plain-data view of the rule configuration."""
        return {
            "skip_on_empty": bool(self.skip_on_empty),
            "skip_on_error": self.skip_on_error,
        }

    @staticmethod
    def message_option(template: str, **parameters: Any) -> dict[str, Any]:
        """Option entry for a message template and its rule-level parameters."""
        return {"template": template, "parameters": {k: stringify(v) for k, v in parameters.items()}}


class RuleHandler(ABC):
    """Evaluates one rule variant.

    Handlers are stateless apart from the injected formatter, so one instance
    serves every run. ``validate`` checks the rule variant, then delegates to
    ``check``; a rule of the wrong variant is a wiring defect and raises
    UnexpectedRuleError instead of producing a validation message.
    """

    rule_type: ClassVar[type[Rule]]

    __slots__ = ("formatter",)

    def __init__(self, formatter: MessageFormatter | None = None):
        self.formatter = formatter or MessageFormatter()

    def validate(self, value: Any, rule: Rule, context: ValidationContext) -> ValidationResult:
        if not isinstance(rule, self.rule_type):
            raise UnexpectedRuleError(self.rule_type, rule)
        return self.check(value, rule, context)

    @abstractmethod
    def check(self, value: Any, rule: Any, context: ValidationContext) -> ValidationResult:
        """Evaluate ``value`` against an already type-checked ``rule``."""

    def fail(self, rule: Rule, template: str, **parameters: Any) -> ValidationResult:
        """Result holding one message rendered from ``template``."""
        return ValidationResult().add_error(self.formatter.format(template, parameters),
            rule=rule.get_name(), parameters=parameters)


def attribute_of(context: ValidationContext) -> str:
    """Attribute name for the ``{attribute}`` placeholder."""
    return context.attribute or ""
