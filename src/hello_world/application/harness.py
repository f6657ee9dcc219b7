"""Self-test harness validating the greeter and reporting progress.

The harness runs a fixed sequence of checks against a :class:`Greet` port,
announces each passing check, and returns a process exit code. A failing
check raises :class:`GreetingMismatchError` straight through; there is no
partial result and no retry.

Contents:
    * :class:`GreetingCheck` - A named check against the greeter.
    * :data:`GREETING_CHECKS` - The checks run by :func:`run_tests`, in order.
    * :func:`run_tests` - Execute all checks and report the outcome.

System Role:
    Application use case. Consumed by the ``selftest`` CLI command and the
    ``hello-world-selftest`` console script.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

from ..domain.behaviors import CANONICAL_GREETING, greet
from ..domain.errors import GreetingMismatchError
from .ports import Echo, Greet

logger = logging.getLogger(__name__)

START_BANNER: Final[str] = "Running tests..."
SUCCESS_MARKER: Final[str] = "✓"
SUMMARY_LINE: Final[str] = "All tests passed!"


@dataclass(frozen=True, slots=True)
class GreetingCheck:
    """A named check run against the greeter.

    Attributes:
        name: Human-readable description printed after the success marker.
        verify: Callable receiving the greeter; raises on failure.
    """

    name: str
    verify: Callable[[Greet], None]


def _verify_exact_text(greeter: Greet) -> None:
    result = greeter()
    if result != CANONICAL_GREETING:
        raise GreetingMismatchError(expected=CANONICAL_GREETING, actual=result)


def _verify_shape(greeter: Greet) -> None:
    result = greeter()
    if len(result) != len(CANONICAL_GREETING) or result != result.strip():
        raise GreetingMismatchError(expected=CANONICAL_GREETING, actual=result)


def _verify_repeatable(greeter: Greet) -> None:
    first = greeter()
    second = greeter()
    if first != second:
        raise GreetingMismatchError(expected=first, actual=second)


GREETING_CHECKS: Final[tuple[GreetingCheck, ...]] = (
    GreetingCheck("greet returns correct string", _verify_exact_text),
    GreetingCheck(
        f"greet returns {len(CANONICAL_GREETING)} characters without surrounding whitespace",
        _verify_shape,
    ),
    GreetingCheck("greet returns identical text on repeated calls", _verify_repeatable),
)


def run_tests(
    greeter: Greet = greet,
    *,
    echo: Echo = print,
    checks: Sequence[GreetingCheck] = GREETING_CHECKS,
) -> int:
    """Run every greeting check and report progress through ``echo``.

    Prints the start banner, one success line per passing check, and the
    summary line. Stops at the first failing check without printing the
    summary.

    Args:
        greeter: Greeter under test. Defaults to the domain ``greet``.
        echo: Line writer for progress output. Defaults to ``print``.
        checks: Checks to run, in order.

    Returns:
        ``0`` when every check passed.

    Raises:
        GreetingMismatchError: When a check fails.

    Example:
        >>> run_tests()
        Running tests...
        ✓ greet returns correct string
        ✓ greet returns 13 characters without surrounding whitespace
        ✓ greet returns identical text on repeated calls
        All tests passed!
        0
    """
    echo(START_BANNER)
    logger.info("Running greeting checks", extra={"checks": len(checks)})
    for check in checks:
        try:
            check.verify(greeter)
        except GreetingMismatchError as exc:
            logger.error(
                "Greeting check failed",
                extra={"check": check.name, "expected": exc.expected, "actual": exc.actual},
            )
            raise
        echo(f"{SUCCESS_MARKER} {check.name}")
    echo(SUMMARY_LINE)
    logger.info("All greeting checks passed")
    return 0


__all__ = [
    "GREETING_CHECKS",
    "GreetingCheck",
    "START_BANNER",
    "SUCCESS_MARKER",
    "SUMMARY_LINE",
    "run_tests",
]
