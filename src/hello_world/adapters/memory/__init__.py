"""In-memory adapters backing ``build_testing``.

Contents:
    * :mod:`.config` - Empty configuration
    * :mod:`.greeting` - ``GreeterStub``, a scripted greeter
    * :mod:`.logging` - Console-silent logging runtime
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .greeting import GreeterStub
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from hello_world.application.ports import GetConfig, Greet, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_greet: Greet = GreeterStub()

__all__ = [
    "GreeterStub",
    "get_config_in_memory",
    "init_logging_in_memory",
]
