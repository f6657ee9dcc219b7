"""Configuration double that never touches the filesystem or the environment."""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory(*, start_dir: str | None = None) -> Config:
    """Return an empty Config, so logging falls back to its model defaults."""
    return Config({}, {})


__all__ = ["get_config_in_memory"]
