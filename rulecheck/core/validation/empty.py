"""Empty-value policies for ``skip_on_empty``.

``skip_on_empty`` accepts a bool or any callable ``(value, is_missing) -> bool``.
``True`` means the default policy, ``WhenEmpty()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

SkipOnEmpty = bool | Callable[[Any, bool], bool] | None


def is_empty(value: Any) -> bool:
    """None, empty string or empty collection."""
    if value is None: return True
    if isinstance(value, str): return value == ""
    if isinstance(value, (list, tuple, dict, set, frozenset)): return len(value) == 0
    return False


@dataclass(frozen=True, slots=True)
class WhenEmpty:
    """Skip when the value is missing, None, "" or an empty collection."""
    trim: bool = False

    def __call__(self, value: Any, is_missing: bool = False) -> bool:
        if is_missing: return True
        if self.trim and isinstance(value, str): value = value.strip()
        return is_empty(value)


@dataclass(frozen=True, slots=True)
class WhenNull:
    """Skip only when the value is None."""

    def __call__(self, value: Any, is_missing: bool = False) -> bool:
        return value is None


@dataclass(frozen=True, slots=True)
class WhenMissing:
    """Skip only when the attribute is absent from the data set."""

    def __call__(self, value: Any, is_missing: bool = False) -> bool:
        return is_missing


_DEFAULT_POLICY = WhenEmpty()


def resolve_skip_on_empty(skip_on_empty: SkipOnEmpty) -> Callable[[Any, bool], bool] | None:
    """Turn a ``skip_on_empty`` setting into a policy callable, or None for "never skip"."""
    if skip_on_empty is None or skip_on_empty is False: return None
    if skip_on_empty is True: return _DEFAULT_POLICY
    if callable(skip_on_empty): return skip_on_empty
    raise TypeError(f"skip_on_empty must be a bool or a callable, got {type(skip_on_empty).__name__}")
