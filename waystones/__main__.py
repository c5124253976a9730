"""Module entrypoint for running Waystones as ``python -m waystones``."""

from __future__ import annotations

from waystones.cli import main


if __name__ == "__main__":
    main()
