"""Per-run validation context."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from .data_set import DataSet, SingleValueDataSet


class ValidationContext:
    """State of one top-level validation call.

    Carries the attribute currently dispatched to a handler and the root data
    set (for rules that compare against other attributes). ``parameters`` is a
    free-form bag for cross-field state shared by rules within the run.

    Created once per ``Validator.validate`` call and never shared between
    calls. Handlers read it and must not modify it.

    Usage:
        context = ValidationContext(create_data_set({"a": 1, "b": 2}))
        with context.attribute_scope("a"):
            handler.validate(1, rule, context)
    """

    __slots__ = ("data_set", "attribute", "parameters")

    def __init__(
        self,
        data_set: DataSet | None = None,
        attribute: str | None = None,
        parameters: dict[str, Any] | None = None,
    ):
        self.data_set = data_set if data_set is not None else SingleValueDataSet(None)
        self.attribute = attribute
        self.parameters = dict(parameters or {})

    @property
    def root(self) -> Any:
        """The raw root value of the run."""
        return self.data_set.data

    @contextmanager
    def attribute_scope(self, attribute: str | None) -> Iterator[ValidationContext]:
        """Set the current attribute, restoring the previous one on exit."""
        previous, self.attribute = self.attribute, attribute
        try:
            yield self
        finally:
            self.attribute = previous

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self.parameters.get(name, default)

    def set_parameter(self, name: str, value: Any) -> None:
        self.parameters[name] = value

    def __repr__(self) -> str:
        return f"ValidationContext(attribute={self.attribute!r}, data_set={type(self.data_set).__name__})"
