"""Process entry point shared by the console scripts, ``python -m`` and tests.

:func:`main` runs the root group with Click's standalone handling switched
off and turns whatever happens into an exit code: Click errors are shown by
Click, everything else is printed by lib_cli_exit_tools.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_world import __init__conf__

from .context import TracebackState
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_world.composition import AppServices

#: Characters of exception text printed without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Characters of traceback printed with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _report(exc: BaseException) -> int:
    """Print ``exc`` unless it is a deliberate exit, then map it to a status."""
    verbose = TracebackState.capture().enabled
    if not isinstance(exc, SystemExit):
        lib_cli_exit_tools.print_exception_message(
            trace_back=verbose,
            length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
        )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _dispatch(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        # Without standalone mode ``ctx.exit(code)`` comes back as the return value.
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report(exc)
    return outcome if isinstance(outcome, int) else ExitCode.SUCCESS


def _stop_logging() -> None:
    """Flush and stop the lib_log_rich runtime; only the main thread owns it."""
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run hello-world once and return its exit status.

    Args:
        argv: Arguments after the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Reapply the traceback flags that were set before
            the run once it finishes.
        services_factory: Builds the services for this run, usually
            ``build_production`` or ``build_testing``.

    Returns:
        ``0`` on success, ``134`` when the self-test finds a wrong greeting,
        ``2`` for usage errors, otherwise the status chosen by
        lib_cli_exit_tools.

    Raises:
        ValueError: When ``services_factory`` is missing.
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass build_production from hello_world.composition")

    saved = TracebackState.capture()
    try:
        return _dispatch(list(sys.argv[1:] if argv is None else argv), services_factory)
    finally:
        if restore_traceback:
            saved.apply()
        _stop_logging()


__all__ = ["TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT", "main"]
