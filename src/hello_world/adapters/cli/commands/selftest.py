"""Self-test command running the greeting harness.

Contents:
    * :func:`cli_selftest` - Run every greeting check and report progress.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_world.application.harness import run_tests
from hello_world.domain.errors import GreetingMismatchError

from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("selftest")
@click.pass_context
def cli_selftest(ctx: click.Context) -> None:
    """Check the greeting and print one line per passing check.

    Exits 0 when every check passes. A mismatch stops the run, prints the
    expected and actual text to stderr and exits 134.
    """
    services = get_cli_context(ctx).services
    with lib_log_rich.runtime.bind(job_id="cli-selftest", extra={"command": "selftest"}):
        logger.info("Running greeting self-test")
        try:
            run_tests(services.greet, echo=click.echo)
        except GreetingMismatchError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.ASSERTION_FAILED) from exc


__all__ = ["cli_selftest"]
