"""Layered configuration for the logging runtime.

Contents:
    * :mod:`.loader` - Cached lib_layered_config read over the bundled defaults
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path

__all__ = [
    "get_config",
    "get_default_config_path",
]
