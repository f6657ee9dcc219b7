"""Scripted greeter for exercising the self-test harness.

Tests swap :class:`GreeterStub` in for the domain ``greet`` to drive the
harness down its failure path (wrong case, padding, drifting output)
without editing the domain module.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import chain, repeat

from ...domain.behaviors import CANONICAL_GREETING


@dataclass
class GreeterStub:
    """Greeter returning scripted replies and counting calls.

    Replies are served in order; the last one repeats once the script is
    exhausted.

    Example:
        >>> stub = GreeterStub.drifting("Hello, World!", "Hello, World!!")
        >>> stub(), stub(), stub()
        ('Hello, World!', 'Hello, World!!', 'Hello, World!!')
        >>> stub.calls
        3
    """

    replies: tuple[str, ...] = (CANONICAL_GREETING,)
    calls: int = 0
    _stream: Iterator[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.replies:
            raise ValueError("GreeterStub needs at least one reply")
        self._stream = chain(self.replies, repeat(self.replies[-1]))

    @classmethod
    def returning(cls, text: str) -> GreeterStub:
        """Build a stub that always returns ``text``."""
        return cls(replies=(text,))

    @classmethod
    def drifting(cls, *texts: str) -> GreeterStub:
        """Build a stub whose reply changes between calls."""
        return cls(replies=tuple(texts))

    def __call__(self) -> str:
        self.calls += 1
        return next(self._stream)


__all__ = ["GreeterStub"]
