"""One-shot lib_log_rich initialisation shared by every entry point.

The console script, ``python -m hello_world`` and the test suite all reach
logging through :func:`init_logging`, so the runtime is configured from the
same ``[lib_log_rich]`` section whichever way the program starts.

Contents:
    * :class:`LoggingConfigModel` - pydantic view of the ``[lib_log_rich]`` section.
    * :func:`init_logging` - Idempotent runtime initialisation.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello_world import __init__conf__


class LoggingConfigModel(BaseModel):
    """Typed view of the ``[lib_log_rich]`` section.

    Unknown keys are kept and forwarded verbatim to ``RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(console_level="DEBUG").model_dump(exclude_none=True)
        {'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a ``RuntimeConfig``.

    ``service`` falls back to the package name when unset.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise the lib_log_rich runtime unless it is already running.

    On the first call this enables ``.env`` loading for ``LOG_*`` variables,
    starts the runtime from ``config`` and bridges the standard ``logging``
    module into it. Later calls return immediately.

    Args:
        config: Merged configuration holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
