"""Application layer: the self-test use case and the ports it runs against.

Contents:
    * :mod:`.harness` - ``run_tests`` and its greeting checks
    * :mod:`.ports` - Callable Protocols implemented by adapters
"""

from __future__ import annotations

from .harness import GREETING_CHECKS, GreetingCheck, run_tests
from .ports import Echo, GetConfig, Greet, InitLogging

__all__ = [
    "GREETING_CHECKS",
    "Echo",
    "GetConfig",
    "Greet",
    "GreetingCheck",
    "InitLogging",
    "run_tests",
]
