"""The ``hello-world`` command group.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - ``-h`` as an alias for ``--help``;
      subcommands inherit it from the group context.
    * :func:`cli` - Group that starts services and logging, then dispatches.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, cast

import rich_click as click

from hello_world import __init__conf__

from .context import CLIContext, set_tracebacks

if TYPE_CHECKING:
    from hello_world.composition import AppServices

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


def _start_services(factory: object) -> AppServices:
    """Build services from the factory in ``ctx.obj`` and start logging.

    Raises:
        RuntimeError: When ``ctx.obj`` is not a factory.
    """
    if not callable(factory):
        raise RuntimeError(f"ctx.obj must be a services factory, got {type(factory).__name__}")
    services = cast("AppServices", factory())
    services.init_logging(services.get_config())
    return services


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full Python traceback when a command fails",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Print and self-test the canonical greeting.

    Without a subcommand the help text is shown.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_world.composition import build_testing
        >>> CliRunner().invoke(cli, ["hello"], obj=build_testing).output
        'Hello, World!\\n'
    """
    ctx.obj = CLIContext(services=_start_services(ctx.obj), traceback=traceback)
    set_tracebacks(traceback)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Command modules import this package, so they are attached after ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_hello, cli_info, cli_selftest

    for command in (cli_hello, cli_selftest, cli_info):
        cli.add_command(command)


_register_commands()


__all__ = ["CLICK_CONTEXT_SETTINGS", "cli"]
