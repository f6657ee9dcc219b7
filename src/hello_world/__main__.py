"""``python -m hello_world`` runs the same CLI as the ``hello-world`` script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
