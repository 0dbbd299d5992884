from __future__ import annotations

"""Entry point for ``python -m autograde.main``."""

from .app.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
