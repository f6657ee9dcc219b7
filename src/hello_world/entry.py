"""Console script entry points with production wiring.

Lives at package level, outside ``adapters``, so it may import the
composition root without breaking the layer contracts.

Contents:
    * :func:`main` - ``hello-world`` console script.
    * :func:`selftest` - ``hello-world-selftest`` console script.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``hello-world`` CLI with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


def selftest() -> int:
    """Run the greeting self-test, ignoring command-line arguments.

    Equivalent to ``hello-world selftest``.

    Returns:
        ``0`` when every check passed, ``134`` on a greeting mismatch.
    """
    return cli_main(["selftest"], services_factory=build_production)


__all__ = ["main", "selftest"]
