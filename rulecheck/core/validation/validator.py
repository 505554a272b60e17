"""Validator: the rule orchestrator.

For every attribute, and every rule attached to it in declaration order, the
validator runs the conditional gate and, when the rule is not skipped,
dispatches to the rule's handler and merges the returned fragment into the
run-wide result:

    1. ``when`` returns False          -> skipped
    2. ``skip_on_empty`` policy holds  -> skipped
    3. ``skip_on_error`` and the attribute already has an error -> skipped
    4. otherwise                       -> evaluated, fragment merged

Validation failures never raise; a result is returned for every input.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from rulecheck.core.config import settings
from rulecheck.core.logging import LoggerRegistry, bound_context, generate_run_id, validator_logger
from .context import ValidationContext
from .data_set import DataSet, create_data_set
from .empty import SkipOnEmpty, resolve_skip_on_empty
from .formatter import MessageFormatter
from .resolver import HandlerResolver
from .result import ValidationResult
from .rule import Rule

log = validator_logger()

RuleSet = Union[Rule, Iterable[Rule], Mapping[str, Union[Rule, Iterable[Rule]]]]


def normalize_rules(rules: RuleSet | None) -> list[tuple[str | None, list[Rule]]]:
    """Flatten a rule set into ``(attribute, rules)`` pairs, preserving order.

    Accepts a single rule, an iterable of rules (applied to the whole value), or
    a mapping of attribute name to a rule or an iterable of rules.
    """
    if rules is None: return []
    if isinstance(rules, Rule): return [(None, [rules])]
    if isinstance(rules, Mapping):
        return [(attribute, [attr_rules] if isinstance(attr_rules, Rule) else _as_rule_list(attr_rules, attribute))
            for attribute, attr_rules in rules.items()]
    return [(None, _as_rule_list(rules, None))]


def _as_rule_list(rules: Iterable[Any], attribute: str | None) -> list[Rule]:
    result = list(rules)
    for rule in result:
        if not isinstance(rule, Rule):
            where = f" for attribute '{attribute}'" if attribute else ""
            raise TypeError(f"Expected a Rule{where}, got {type(rule).__name__}")
    return result


class Validator:
    """Evaluates rule sets against values.

    Usage:
        validator = Validator()
        result = validator.validate({"site": "https://example.com"}, {"site": Url()})
        if not result.is_valid:
            print(result.get_error_messages_indexed_by_attribute())

    A validator holds only shared, immutable collaborators and may be used by
    several threads at once.
    """

    __slots__ = ("resolver", "default_skip_on_empty")

    def __init__(
        self,
        resolver: HandlerResolver | None = None,
        *,
        formatter: MessageFormatter | None = None,
        default_skip_on_empty: SkipOnEmpty = None,
    ):
        self.resolver = resolver or HandlerResolver(formatter)
        self.default_skip_on_empty = (settings.DEFAULT_SKIP_ON_EMPTY
            if default_skip_on_empty is None else default_skip_on_empty)

    def validate(
        self,
        data: Any,
        rules: RuleSet | None = None,
        *,
        context: ValidationContext | None = None,
    ) -> ValidationResult:
        """Validate ``data`` against ``rules``.

        When ``rules`` is None and ``data`` provides ``get_rules()``, those
        rules are used.
        """
        data_set = create_data_set(data)
        if rules is None and callable(getattr(data_set.data, "get_rules", None)):
            rules = data_set.data.get_rules()

        context = context or ValidationContext(data_set)
        result = ValidationResult()
        with bound_context(validation_run=generate_run_id()):
            for attribute, attr_rules in normalize_rules(rules):
                value, is_missing = self._read(data_set, attribute)
                with context.attribute_scope(attribute):
                    for rule in attr_rules:
                        self._apply(rule, value, is_missing, context, result)

            if LoggerRegistry.is_enabled_for("validator", logging.DEBUG):
                log.debug("validation_completed", valid=result.is_valid, error_count=len(result),
                    attributes=list(result.get_error_messages_indexed_by_attribute()))
        return result

    def _read(self, data_set: DataSet, attribute: str | None) -> tuple[Any, bool]:
        if attribute is None: return data_set.data, False
        return data_set.get_attribute_value(attribute), not data_set.has_attribute(attribute)

    def _apply(
        self,
        rule: Rule,
        value: Any,
        is_missing: bool,
        context: ValidationContext,
        result: ValidationResult,
    ) -> None:
        key = context.attribute or ""

        if rule.when is not None and not rule.when(value, context):
            log.debug("rule_skipped", rule=rule.get_name(), attribute=key, reason="when")
            return

        skip_on_empty = rule.skip_on_empty if rule.skip_on_empty is not None else self.default_skip_on_empty
        if (policy := resolve_skip_on_empty(skip_on_empty)) is not None and policy(value, is_missing):
            log.debug("rule_skipped", rule=rule.get_name(), attribute=key, reason="empty")
            return

        if rule.skip_on_error and not result.is_attribute_valid(key):
            log.debug("rule_skipped", rule=rule.get_name(), attribute=key, reason="error")
            return

        fragment = self.resolver.resolve(rule).validate(value, rule, context)
        result.merge(fragment, key)
        log.debug("rule_evaluated", rule=rule.get_name(), attribute=key, valid=fragment.is_valid)
