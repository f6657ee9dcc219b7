"""Application ports: the callables the harness and the CLI depend on.

Each Protocol describes one ``__call__`` signature. Plain module-level
functions and small callable objects satisfy them structurally, so
adapters never subclass anything.

``Config`` is imported only while type checking; the application layer
does not load lib_layered_config at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class Greet(Protocol):
    """Return the greeting text."""

    def __call__(self) -> str: ...


class Echo(Protocol):
    """Write one line of progress output."""

    def __call__(self, message: str) -> None: ...


class GetConfig(Protocol):
    """Return the merged configuration holding the ``[lib_log_rich]`` section."""

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Start the logging runtime from a configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "Echo",
    "GetConfig",
    "Greet",
    "InitLogging",
]
