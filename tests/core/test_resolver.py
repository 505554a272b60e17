from dataclasses import dataclass

import pytest

from rulecheck.core.errors import HandlerNotFoundError
from rulecheck.core.validation import (
    HandlerResolver,
    MessageFormatter,
    Rule,
    RuleHandler,
    ValidationResult,
)
from rulecheck.rules import IsTrue, IsTrueHandler, Url, UrlHandler


class ShoutingFormatter(MessageFormatter):
    def format(self, template, parameters):
        return super().format(template, parameters).upper()


@dataclass(frozen=True)
class Broken(Rule):
    def get_handler(self):
        return object


class AlwaysFails(RuleHandler):
    rule_type = IsTrue

    def check(self, value, rule, context):
        return ValidationResult().add_error("nope")


def test_declared_handler_is_instantiated_once():
    resolver = HandlerResolver()
    first = resolver.resolve(IsTrue())
    second = resolver.resolve(IsTrue(strict=True))
    assert isinstance(first, IsTrueHandler)
    assert first is second
    assert isinstance(resolver.resolve(Url()), UrlHandler)


def test_handlers_receive_the_resolver_formatter():
    formatter = ShoutingFormatter()
    handler = HandlerResolver(formatter).resolve(IsTrue())
    assert handler.formatter is formatter


def test_registered_handler_overrides_declared_one():
    resolver = HandlerResolver()
    resolver.register(IsTrue, AlwaysFails)
    assert isinstance(resolver.resolve(IsTrue()), AlwaysFails)


def test_register_accepts_instances():
    resolver = HandlerResolver()
    handler = AlwaysFails()
    resolver.register(IsTrue, handler)
    assert resolver.resolve(IsTrue()) is handler


def test_register_rejects_non_handlers():
    with pytest.raises(TypeError):
        HandlerResolver().register(IsTrue, object())


def test_rule_declaring_a_non_handler_is_a_wiring_error():
    with pytest.raises(HandlerNotFoundError):
        HandlerResolver().resolve(Broken())


def test_rule_may_declare_a_handler_instance():
    handler = AlwaysFails()

    @dataclass(frozen=True)
    class WithInstance(IsTrue):
        def get_handler(self):
            return handler

    assert HandlerResolver().resolve(WithInstance()) is handler
