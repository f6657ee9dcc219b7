"""Package metadata, config defaults and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from hello_world.adapters.config.loader import get_config, get_default_config_path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    build_table = cast(dict[str, Any], hatch_table.get("build", {}))
    targets_table = cast(dict[str, Any], build_table.get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


def _get_package_dir() -> Path:
    """Locate the package directory from the wheel build configuration."""
    for package_entry in cast(list[Any], _wheel_table().get("packages", [])):
        if isinstance(package_entry, str):
            candidate = PROJECT_ROOT / package_entry
            if candidate.is_dir():
                return candidate
    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info lists the package name and version."""
    from hello_world import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for hello_world:" in captured
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    """Static metadata matches pyproject.toml."""
    from hello_world import __init__conf__

    project = cast(dict[str, Any], _load_pyproject()["project"])
    assert __init__conf__.name == "hello_world"
    assert __init__conf__.version == project["version"]
    assert __init__conf__.shell_command == "hello-world"


@pytest.mark.os_agnostic
def test_console_scripts_point_at_entry_functions() -> None:
    """Both console scripts resolve to hello_world.entry."""
    scripts = cast(dict[str, str], _load_pyproject()["project"]["scripts"])

    assert scripts["hello-world"] == "hello_world.entry:main"
    assert scripts["hello-world-selftest"] == "hello_world.entry:selftest"


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    """The PEP 561 marker ships in the package source."""
    py_typed = _get_package_dir() / "py.typed"
    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
def test_py_typed_marker_included_in_wheel_config() -> None:
    """py.typed is listed in the wheel build includes."""
    includes = cast(list[str], _wheel_table().get("include", []))
    assert any("py.typed" in entry for entry in includes), "py.typed must be in wheel build includes"


@pytest.mark.os_agnostic
def test_default_config_file_ships_logging_section() -> None:
    """The bundled defaultconfig.toml exists and configures lib_log_rich."""
    path = get_default_config_path()

    assert path.is_file()
    assert "lib_log_rich" in rtoml.load(path)


@pytest.mark.os_agnostic
def test_get_config_merges_bundled_defaults_and_caches_the_result(tmp_path: Path) -> None:
    """The defaults layer supplies [lib_log_rich]; repeat calls reuse the same Config."""
    config = get_config(start_dir=str(tmp_path))

    assert "lib_log_rich" in config.as_dict()
    assert get_config(start_dir=str(tmp_path)) is config
