"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - rich-click command-line interface
    * :mod:`.config` - Layered configuration for the logging runtime
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory stand-ins for tests
"""

from __future__ import annotations

__all__: list[str] = []
