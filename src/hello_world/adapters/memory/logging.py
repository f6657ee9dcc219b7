"""Logging double for the in-memory services.

Every command opens a ``lib_log_rich.runtime.bind`` scope, which fails
unless a runtime is running. This adapter starts one with a silenced
console and ignores the ``[lib_log_rich]`` section; it neither reads
``.env`` files nor attaches to the standard ``logging`` module.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from hello_world import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a console-silent runtime unless one is already running."""
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
        )
    )


__all__ = ["init_logging_in_memory"]
