"""Per-invocation CLI state and the process-wide traceback flags.

The root group turns Click's ``ctx.obj`` from a services factory into a
:class:`CLIContext`. Traceback flags live in ``lib_cli_exit_tools.config``,
which outlives a single invocation, so :func:`~.main.main` captures them as a
:class:`TracebackState` before running and reapplies them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click

if TYPE_CHECKING:
    from hello_world.composition import AppServices


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools`` traceback flags at one moment.

    Example:
        >>> saved = TracebackState.capture()
        >>> TracebackState(enabled=True, force_color=True).apply()
        >>> TracebackState.capture().enabled
        True
        >>> saved.apply()
    """

    enabled: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackState:
        settings = lib_cli_exit_tools.config
        return cls(enabled=bool(settings.traceback), force_color=bool(settings.traceback_force_color))

    def apply(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def set_tracebacks(enabled: bool) -> None:
    """Switch full, colourised tracebacks on or off for this process."""
    TracebackState(enabled=enabled, force_color=enabled).apply()


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group hands down to ``hello``, ``selftest`` and ``info``."""

    services: AppServices
    traceback: bool = False


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: When the command was invoked without the root group.
    """
    state = ctx.find_object(CLIContext)
    if state is None:
        raise RuntimeError("CLI context not initialized: invoke subcommands through the hello-world group")
    return state


__all__ = [
    "CLIContext",
    "TracebackState",
    "get_cli_context",
    "set_tracebacks",
]
