"""Built-in rules.

Each module pairs one immutable rule with the handler that evaluates it.
"""

from .is_true import IsTrue, IsTrueHandler
from .url import Url, UrlHandler, idn_to_ascii
from .length import Length, LengthHandler
from .number import Number, NumberHandler

__all__ = [
    "IsTrue",
    "IsTrueHandler",
    "Url",
    "UrlHandler",
    "idn_to_ascii",
    "Length",
    "LengthHandler",
    "Number",
    "NumberHandler",
]
