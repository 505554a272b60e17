"""Monadic Error Handling System

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- AppErrorException: raised for programming errors that must abort a call

Usage:
    from rulecheck.core.errors import Ok, Err, try_result

    match try_result(lambda: host.encode("idna").decode("ascii")):
        case Ok(ascii_host):
            ...
        case Err(error):
            log.debug("idn_failed", code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
    try_result,
)
from .exceptions import (
    AppErrorException,
    UnexpectedRuleError,
    HandlerNotFoundError,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    "try_result",
    "AppErrorException",
    "UnexpectedRuleError",
    "HandlerNotFoundError",
]
