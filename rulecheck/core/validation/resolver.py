"""Handler resolution.

Maps a rule to the handler instance that processes it. Lookup order:
1. a handler registered for the rule's class (``register``)
2. the handler the rule declares via ``get_handler()``

Handler classes are instantiated once with the resolver's formatter and
reused; handlers are stateless, so sharing them across runs is safe.
"""
from __future__ import annotations

from rulecheck.core.errors import HandlerNotFoundError
from rulecheck.core.logging import rules_logger
from .formatter import MessageFormatter
from .rule import Rule, RuleHandler

log = rules_logger()


class HandlerResolver:
    """Registry of rule handlers keyed on rule class."""

    __slots__ = ("formatter", "_registry", "_instances")

    def __init__(self, formatter: MessageFormatter | None = None):
        self.formatter = formatter or MessageFormatter()
        self._registry: dict[type[Rule], RuleHandler] = {}
        self._instances: dict[type[RuleHandler], RuleHandler] = {}

    def register(self, rule_type: type[Rule], handler: RuleHandler | type[RuleHandler]) -> None:
        """Override the handler used for ``rule_type``."""
        if isinstance(handler, type) and issubclass(handler, RuleHandler):
            handler = self._instantiate(handler)
        if not isinstance(handler, RuleHandler):
            raise TypeError(f"Expected a RuleHandler for {rule_type.__name__}, got {handler!r}")
        self._registry[rule_type] = handler

    def resolve(self, rule: Rule) -> RuleHandler:
        if (handler := self._registry.get(type(rule))) is not None: return handler

        declared = rule.get_handler()
        if isinstance(declared, RuleHandler): return declared
        if isinstance(declared, type) and issubclass(declared, RuleHandler):
            if (handler := self._instances.get(declared)) is None:
                handler = self._instances[declared] = self._instantiate(declared)
                log.debug("handler_resolved", rule=rule.get_name(), handler=declared.__name__)
            return handler

        raise HandlerNotFoundError(rule, declared)

    def _instantiate(self, handler_type: type[RuleHandler]) -> RuleHandler:
        return handler_type(self.formatter)
