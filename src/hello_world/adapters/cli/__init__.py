"""Command-line adapter: the ``hello-world`` group and its entry point.

Contents:
    * :func:`cli` - Root group from :mod:`.root`
    * :func:`main` - Exit-code returning entry point from :mod:`.main`
    * ``hello``, ``selftest`` and ``info`` from :mod:`.commands`
    * :class:`CLIContext` and traceback helpers from :mod:`.context`
"""

from __future__ import annotations

from .commands import cli_hello, cli_info, cli_selftest
from .context import CLIContext, TracebackState, get_cli_context, set_tracebacks
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "cli",
    "cli_hello",
    "cli_info",
    "cli_selftest",
    "get_cli_context",
    "main",
    "set_tracebacks",
]
