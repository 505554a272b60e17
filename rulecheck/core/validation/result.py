"""Validation Result System

Append-only, order-preserving collection of rendered error messages keyed by
attribute. The empty attribute ``""`` stands for the whole validated value.

Report Format (``ValidationResult.to_dict``):
{
    "valid": false,
    "errors": [
        {"attribute": "email", "message": "This value is not a valid URL.", "rule": "url"}
    ]
}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from rulecheck.core.errors import AppError, ErrorCode, ErrorContext


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """One rendered error message.

    - message: final text, placeholders already substituted
    - attribute: attribute the message belongs to ("" for the whole value)
    - rule: name of the rule that produced it, when known
    - parameters: the parameters the message was rendered with
    """
    message: str
    attribute: str = ""
    rule: str | None = None
    parameters: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def with_attribute(self, attribute: str) -> ValidationErrorDetail:
        return ValidationErrorDetail(message=self.message, attribute=attribute, rule=self.rule, parameters=self.parameters)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for reports."""
        result: dict[str, Any] = {"attribute": self.attribute, "message": self.message}
        if self.rule: result["rule"] = self.rule
        return result


class ValidationResult:
    """Errors collected during validation, in insertion order.

    A handler fills a fresh result with zero or more messages; the validator
    merges every fragment into the run-wide result under the attribute key.
    An attribute with no errors is reported exactly like one that was never
    validated.
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: list[ValidationErrorDetail] | None = None):
        self._errors: list[ValidationErrorDetail] = list(errors or [])

    @property
    def is_valid(self) -> bool: return not self._errors

    @property
    def errors(self) -> list[ValidationErrorDetail]: return self._errors.copy()

    def is_attribute_valid(self, attribute: str) -> bool:
        return not any(e.attribute == attribute for e in self._errors)

    def add_error(
        self,
        message: str,
        *,
        attribute: str = "",
        rule: str | None = None,
        parameters: dict[str, Any] | None = None,
    ) -> ValidationResult:
        self._errors.append(ValidationErrorDetail(message=message, attribute=attribute, rule=rule,
            parameters=dict(parameters or {})))
        return self

    def merge(self, other: ValidationResult, attribute: str | None = None) -> ValidationResult:
        """Append another result's errors, re-keying them to ``attribute`` when given."""
        for detail in other._errors:
            self._errors.append(detail if attribute is None else detail.with_attribute(attribute))
        return self

    def get_error_messages(self) -> list[str]: return [e.message for e in self._errors]

    def get_attribute_errors(self, attribute: str) -> list[ValidationErrorDetail]:
        return [e for e in self._errors if e.attribute == attribute]

    def get_attribute_error_messages(self, attribute: str) -> list[str]:
        return [e.message for e in self._errors if e.attribute == attribute]

    def get_common_error_messages(self) -> list[str]:
        """Messages for the whole value rather than a named attribute."""
        return self.get_attribute_error_messages("")

    def get_error_messages_indexed_by_attribute(self) -> dict[str, list[str]]:
        """Group messages by attribute; attributes appear in order of their first error."""
        indexed: dict[str, list[str]] = {}
        for e in self._errors: indexed.setdefault(e.attribute, []).append(e.message)
        return indexed

    def items(self) -> list[tuple[str, str]]:
        """(attribute, message) pairs in deterministic order."""
        return [(e.attribute, e.message) for e in self._errors]

    def raise_if_errors(self, message: str = "Validation failed") -> None:
        """Raise ValidationError if errors exist."""
        if self._errors:
            raise ValidationError(message=message, details=self._errors.copy())

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.is_valid, "errors": [e.to_dict() for e in self._errors]}

    def __iter__(self) -> Iterator[ValidationErrorDetail]: return iter(self._errors.copy())

    def __len__(self) -> int: return len(self._errors)

    def __repr__(self) -> str:
        return f"ValidationResult(errors={self.get_error_messages_indexed_by_attribute()!r})"


@dataclass
class ValidationError(Exception):
    """Validation failure raised on request via ``ValidationResult.raise_if_errors``.

    The validator itself never raises this; failures are always returned as a
    ValidationResult.
    """
    message: str
    details: list[ValidationErrorDetail]

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.details: return self.message
        if len(self.details) == 1:
            d = self.details[0]
            return f"{d.attribute}: {d.message}" if d.attribute else d.message
        return f"{self.message} ({len(self.details)} errors)"

    @property
    def field_errors(self) -> dict[str, list[ValidationErrorDetail]]:
        """Group errors by attribute."""
        result: dict[str, list[ValidationErrorDetail]] = {}
        for detail in self.details: result.setdefault(detail.attribute, []).append(detail)
        return result

    def to_app_error(self) -> AppError:
        """Convert to AppError for callers using the error layer."""
        if len(self.details) == 1:
            d = self.details[0]
            return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=str(self),
                context=ErrorContext(origin="validation"), metadata={"attribute": d.attribute, "rule": d.rule})

        return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=f"{self.message}: {len(self.details)} errors",
            context=ErrorContext(origin="validation"),
            metadata={"error_count": len(self.details), "errors": [d.to_dict() for d in self.details]})

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": "validation_error", "message": self.message,
            "error_count": len(self.details), "errors": [d.to_dict() for d in self.details]}}
