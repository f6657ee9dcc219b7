"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

CANONICAL_GREETING: Final[str] = "Hello, World!"


def greet() -> str:
    r"""Return the canonical greeting string.

    The result is the same object on every call and carries no trailing
    newline, so callers may compare it by equality without normalising.

    Returns:
        The canonical greeting string.

    Example:
        >>> greet()
        'Hello, World!'
        >>> len(greet())
        13
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "greet",
]
