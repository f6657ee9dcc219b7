"""In-memory adapters and composition wiring.

Static conformance to the Protocols is checked by pyright through the
TYPE_CHECKING assignments in ``adapters.memory`` and ``composition``.
"""

from __future__ import annotations

from dataclasses import fields

import lib_log_rich.runtime
import pytest
from lib_layered_config import Config

from hello_world.adapters.memory import GreeterStub, get_config_in_memory, init_logging_in_memory
from hello_world.composition import AppServices, build_production, build_testing
from hello_world.domain.behaviors import greet


@pytest.mark.os_agnostic
def test_in_memory_config_is_empty() -> None:
    """No files and no environment variables leak into the testing wiring."""
    config = get_config_in_memory(start_dir="/nonexistent")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_in_memory_logging_starts_a_runtime_that_accepts_bind(stopped_logging_runtime: None) -> None:
    """Commands can open a bind scope right after the in-memory initialiser ran."""
    init_logging_in_memory(Config({}, {}))

    assert lib_log_rich.runtime.is_initialised()
    with lib_log_rich.runtime.bind(job_id="ports-test", extra={"command": "selftest"}):
        pass


@pytest.mark.os_agnostic
def test_in_memory_logging_keeps_an_existing_runtime(stopped_logging_runtime: None) -> None:
    """A second call is a no-op."""
    init_logging_in_memory(Config({}, {}))
    init_logging_in_memory(Config({"lib_log_rich": {"console_level": "DEBUG"}}, {}))

    assert lib_log_rich.runtime.is_initialised()


@pytest.mark.os_agnostic
def test_greeter_stub_defaults_to_the_canonical_greeting() -> None:
    """An unconfigured stub behaves like the real greeter."""
    stub = GreeterStub()

    assert stub() == greet()
    assert stub.calls == 1


@pytest.mark.os_agnostic
def test_greeter_stub_repeats_its_last_reply() -> None:
    """Once the script runs out the final reply is served again."""
    stub = GreeterStub.drifting("a", "b")

    assert [stub(), stub(), stub(), stub()] == ["a", "b", "b", "b"]


@pytest.mark.os_agnostic
def test_greeter_stub_requires_a_reply() -> None:
    """An empty script is rejected up front."""
    with pytest.raises(ValueError, match="at least one reply"):
        GreeterStub(replies=())


@pytest.mark.os_agnostic
@pytest.mark.parametrize("build", [build_production, build_testing])
def test_every_service_is_callable(build: object) -> None:
    """Both builders fill every AppServices field with a callable."""
    services = build()  # type: ignore[operator]

    assert isinstance(services, AppServices)
    assert all(callable(getattr(services, field.name)) for field in fields(services))


@pytest.mark.os_agnostic
def test_build_production_wires_the_domain_greeter() -> None:
    """Production uses the domain greet function."""
    assert build_production().greet is greet


@pytest.mark.os_agnostic
def test_build_testing_wires_a_supplied_greeter() -> None:
    """build_testing exposes an injected greeter as ``greet``."""
    stub = GreeterStub.returning("hello, world!")

    assert build_testing(greeter=stub).greet is stub
    assert build_testing().greet is greet


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """Services cannot be swapped on an existing container."""
    services = build_testing()

    with pytest.raises(AttributeError):
        services.greet = GreeterStub()  # type: ignore[misc]
