"""Programming-error exceptions.

Raised when a validation set is wired incorrectly (a handler receives a rule
it does not process, or a rule declares no usable handler). These never turn
into validation messages.
"""
from __future__ import annotations

from typing import Any

from .types import AppError, ErrorCode, ErrorContext


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when an AppError has to abort the current call instead of being
    returned as a value.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)


def _class_path(obj: Any) -> str:
    cls = obj if isinstance(obj, type) else type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


class UnexpectedRuleError(AppErrorException):
    """A handler was called with a rule of a variant it does not process."""

    def __init__(self, expected: type | tuple[type, ...], rule: Any):
        expected_types = expected if isinstance(expected, tuple) else (expected,)
        expected_names = " or ".join(_class_path(t) for t in expected_types)
        super().__init__(AppError(
            code=ErrorCode.E9010_UNEXPECTED_RULE,
            message=f'Expected "{expected_names}", but "{_class_path(rule)}" given.',
            context=ErrorContext(origin="handler"),
            metadata={"expected": expected_names, "given": _class_path(rule)},
        ))


class HandlerNotFoundError(AppErrorException):
    """A rule's declared handler could not be resolved to a RuleHandler."""

    def __init__(self, rule: Any, handler: Any):
        super().__init__(AppError(
            code=ErrorCode.E9011_HANDLER_NOT_FOUND,
            message=f'Handler "{handler!r}" declared by rule "{_class_path(rule)}" is not a rule handler.',
            context=ErrorContext(origin="resolver"),
            metadata={"rule": _class_path(rule), "handler": repr(handler)},
        ))
