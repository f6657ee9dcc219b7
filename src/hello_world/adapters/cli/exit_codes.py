"""Exit statuses chosen by hello-world itself.

Click picks ``2`` for usage errors and lib_cli_exit_tools maps signals and
unexpected exceptions; neither is repeated here.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit statuses of the ``selftest`` command.

    ``ASSERTION_FAILED`` is 128 + SIGABRT, the status a process killed by a
    failed ``assert()`` reports.

    Example:
        >>> int(ExitCode.ASSERTION_FAILED)
        134
    """

    SUCCESS = 0
    ASSERTION_FAILED = 134


__all__ = ["ExitCode"]
