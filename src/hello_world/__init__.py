"""Public package surface exposing the greeter, the self-test, and configuration.

Imports are routed through the architectural layers:
- Domain exports: the greeter and its canonical text
- Application exports: the self-test harness
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.harness import run_tests

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    greet,
)
from .domain.errors import GreetingMismatchError

__all__ = [
    "CANONICAL_GREETING",
    "GreetingMismatchError",
    "get_config",
    "greet",
    "print_info",
    "run_tests",
]
