"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class GreetingMismatchError(AssertionError):
    """The greeter produced text other than the expected greeting.

    Raised by the self-test harness when a check fails. Inherits from
    ``AssertionError`` so plain ``assert``-style handlers and pytest treat it
    as an assertion failure. Not recoverable inside the harness: the CLI
    translates it into ``ExitCode.ASSERTION_FAILED``.

    Attributes:
        expected: The text the check required.
        actual: The text the greeter returned.

    Example:
        >>> err = GreetingMismatchError(expected="Hello, World!", actual="hello, world!")
        >>> str(err)
        "greeting mismatch: expected 'Hello, World!', got 'hello, world!'"
        >>> isinstance(err, AssertionError)
        True
    """

    def __init__(self, *, expected: str, actual: object) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"greeting mismatch: expected {expected!r}, got {actual!r}")


__all__ = [
    "GreetingMismatchError",
]
