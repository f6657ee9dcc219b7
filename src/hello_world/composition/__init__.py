"""Composition root: the only place adapters are bound to ports.

``build_production`` is used by the console scripts and ``python -m``;
``build_testing`` swaps in the in-memory adapters and, optionally, a
scripted greeter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..domain.behaviors import greet

if TYPE_CHECKING:
    from ..application.ports import GetConfig, Greet, InitLogging

    _assert_greet: Greet = greet
    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations handed to the CLI for one invocation."""

    greet: Greet
    get_config: GetConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Domain greeter, layered configuration and the lib_log_rich runtime."""
    return AppServices(greet=greet, get_config=get_config, init_logging=init_logging)


def build_testing(*, greeter: Greet | None = None) -> AppServices:
    """In-memory configuration and a silent logging runtime.

    Args:
        greeter: Exposed as ``greet``; the domain greeter when None. Pass a
            ``GreeterStub`` to drive the self-test down its failure path.
    """
    from ..adapters.memory import get_config_in_memory, init_logging_in_memory

    return AppServices(
        greet=greeter if greeter is not None else greet,
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
