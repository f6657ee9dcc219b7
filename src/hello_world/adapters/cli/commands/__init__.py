"""Subcommands of the ``hello-world`` group.

Contents:
    * ``hello`` and ``info`` from :mod:`.info`
    * ``selftest`` from :mod:`.selftest`
"""

from __future__ import annotations

from .info import cli_hello, cli_info
from .selftest import cli_selftest

__all__ = ["cli_hello", "cli_info", "cli_selftest"]
