"""Layered configuration loading for hello-world.

The only section hello-world reads is ``[lib_log_rich]``; the greeting itself
is fixed. lib_layered_config merges the bundled ``defaultconfig.toml`` with
the app, host and user files, ``.env`` and ``HELLO_WORLD___*`` environment
variables, in that order of increasing precedence.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config, read_config

from hello_world import __init__conf__


def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, start_dir: str | None = None) -> Config:
    """Read every configuration layer once per ``start_dir``.

    Args:
        start_dir: Directory where ``.env`` discovery starts; the current
            working directory when None.

    Returns:
        Immutable merged Config with provenance metadata.

    Example:
        >>> "lib_log_rich" in get_config().as_dict()
        True
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
]
