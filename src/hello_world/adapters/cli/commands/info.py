"""``hello`` prints the greeting; ``info`` prints package metadata."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_world import __init__conf__

from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("hello")
@click.pass_context
def cli_hello(ctx: click.Context) -> None:
    """Print the greeting followed by a newline."""
    greeter = get_cli_context(ctx).services.greet
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        text = greeter()
        logger.info("Greeting produced", extra={"length": len(text)})
        click.echo(text)


@click.command("info")
def cli_info() -> None:
    """Show the installed name, version and shell command."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        __init__conf__.print_info()


__all__ = ["cli_hello", "cli_info"]
