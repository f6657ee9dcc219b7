"""Domain layer: the greeter and the error raised when it misbehaves.

Contents:
    * :mod:`.behaviors` - ``greet`` and its canonical text
    * :mod:`.errors` - ``GreetingMismatchError``
"""

from __future__ import annotations

from .behaviors import CANONICAL_GREETING, greet
from .errors import GreetingMismatchError

__all__ = [
    "CANONICAL_GREETING",
    "GreetingMismatchError",
    "greet",
]
