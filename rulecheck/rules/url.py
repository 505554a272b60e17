"""Url: the value must be an HTTP(S) URL.

Only the scheme and host are checked. Path, query and fragment are accepted
as-is.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Sequence

from rulecheck.core.errors import ErrorCode, try_result
from rulecheck.core.logging import rules_logger
from rulecheck.core.validation import ValidationContext, ValidationResult
from rulecheck.core.validation.rule import Rule, RuleHandler, attribute_of

log = rules_logger()

# Inputs this long are rejected before matching to bound regex cost
MAX_URL_LENGTH = 2000

DEFAULT_PATTERN = (
    r"^{schemes}://(([a-zA-Z0-9][a-zA-Z0-9_-]*)(\.[a-zA-Z0-9][a-zA-Z0-9_-]*)+)(?::\d{1,5})?([?/#].*$|$)"
)

_HOST_SEGMENT = re.compile(r"://([^/]+)")


@lru_cache(maxsize=128)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)


def idn_to_ascii(host: str) -> str:
    """ASCII (punycode) form of an internationalized host; "" when it cannot be encoded."""
    result = try_result(lambda: host.encode("idna"), code=ErrorCode.E2002_INVALID_FORMAT,
        origin="idn_to_ascii").map(lambda encoded: encoded.decode("ascii"))
    if result.is_err():
        log.debug("idn_conversion_failed", host=host, error=result.unwrap_err().message)
    return result.unwrap_or("")


def _convert_host_segment(segment: str) -> str:
    host, sep, port = segment.rpartition(":")
    if sep and port.isdigit(): return idn_to_ascii(host) + sep + port
    return idn_to_ascii(segment)


def convert_idn(value: str) -> str:
    """Encode the host part of ``value``; a value without ``://`` is treated as a bare host.

    Only the segment between ``://`` and the next ``/`` changes; a trailing
    ``:port`` is kept as-is.
    """
    if "://" not in value: return idn_to_ascii(value)
    return _HOST_SEGMENT.sub(lambda m: "://" + _convert_host_segment(m.group(1)), value, count=1)


@dataclass(frozen=True, slots=True)
class Url(Rule):
    """Checks scheme and host of a URL against ``pattern``.

    ``{schemes}`` in the pattern is replaced by a case-insensitive alternation
    of ``valid_schemes``. With ``enable_idn`` the host is converted to its
    ASCII form before matching, so ``https://пример.рф`` is accepted.

    Message placeholders: ``{attribute}``, ``{value}``.
    """
    pattern: str = DEFAULT_PATTERN
    valid_schemes: Sequence[str] = ("http", "https")
    enable_idn: bool = False
    message: str = "This value is not a valid URL."

    def __post_init__(self):
        object.__setattr__(self, "valid_schemes", tuple(self.valid_schemes))

    def get_pattern(self) -> str:
        if "{schemes}" not in self.pattern: return self.pattern
        schemes = "|".join(re.escape(s) for s in self.valid_schemes)
        return self.pattern.replace("{schemes}", f"(?i:{schemes})")

    @property
    def compiled_pattern(self) -> re.Pattern:
        return _compile(self.get_pattern())

    def get_handler(self) -> type[UrlHandler]:
        return UrlHandler

    def get_options(self) -> dict[str, Any]:
        return {
            "pattern": self.get_pattern(),
            "valid_schemes": list(self.valid_schemes),
            "enable_idn": self.enable_idn,
            "message": self.message_option(self.message),
            **super(Url, self).get_options(),
        }


class UrlHandler(RuleHandler):
    rule_type = Url

    def check(self, value: Any, rule: Url, context: ValidationContext) -> ValidationResult:
        if isinstance(value, str) and len(value) < MAX_URL_LENGTH:
            candidate = convert_idn(value) if rule.enable_idn else value
            if rule.compiled_pattern.match(candidate): return ValidationResult()

        return self.fail(rule, rule.message, attribute=attribute_of(context), value=value)
