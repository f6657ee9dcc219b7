"""Fixtures shared by the CLI, harness and entry-point tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import pytest
from click.testing import CliRunner

from hello_world.adapters.cli.context import TracebackState

if TYPE_CHECKING:
    from hello_world.application.ports import Greet
    from hello_world.composition import AppServices

ANSI_ESCAPE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def _stop_logging_runtime() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def cli_runner() -> CliRunner:
    """CliRunner with stdout and stderr kept apart (``result.stdout`` is progress only)."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """``build_production``: layered config and the configured lib_log_rich runtime."""
    from hello_world.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """``build_testing``: empty config, console-silent runtime, real greeter."""
    from hello_world.composition import build_testing

    return build_testing


@pytest.fixture
def services_with_greeter() -> Callable[[Greet], Callable[[], AppServices]]:
    """Turn any greeter into a services factory for ``cli.main(obj=...)``.

    Example:
        def test_mismatch(cli_runner, services_with_greeter) -> None:
            factory = services_with_greeter(GreeterStub.returning("hello, world!"))
            assert cli_runner.invoke(cli, ["selftest"], obj=factory).exit_code == 134
    """
    from hello_world.composition import build_testing

    def _wire(greeter: Greet) -> Callable[[], AppServices]:
        return lambda: build_testing(greeter=greeter)

    return _wire


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove colour escapes so assertions read plain text."""
    return lambda text: ANSI_ESCAPE.sub("", text)


@pytest.fixture
def traceback_flags() -> Iterator[None]:
    """Start with tracebacks off and put the previous flags back afterwards."""
    saved = TracebackState.capture()
    TracebackState(enabled=False, force_color=False).apply()
    try:
        yield
    finally:
        saved.apply()


@pytest.fixture
def stopped_logging_runtime() -> Iterator[None]:
    """Run the test with no lib_log_rich runtime, as in a fresh interpreter."""
    _stop_logging_runtime()
    try:
        yield
    finally:
        _stop_logging_runtime()
