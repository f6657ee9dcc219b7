"""Static package metadata consumed by the CLI and the configuration layer.

Values here are kept in sync with ``pyproject.toml`` and are read at import
time, so they must not depend on anything outside the standard library.

Contents:
    * Distribution metadata (``name``, ``title``, ``version``, ``shell_command``).
    * lib_layered_config identifiers (``LAYEREDCONF_*``).
    * :func:`print_info` - Render the metadata block for ``hello-world info``.
"""

from __future__ import annotations

name = "hello_world"
title = "Print and self-test the canonical Hello, World! greeting"
version = "1.0.0"
author = "bitranox"
shell_command = "hello-world"

#: Vendor, application and slug used by lib_layered_config to locate files.
LAYEREDCONF_VENDOR = "bitranox"
LAYEREDCONF_APP = "Hello World"
LAYEREDCONF_SLUG = "hello-world"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_world:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
