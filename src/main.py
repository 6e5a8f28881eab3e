"""Entry point for the W Snake game."""

from __future__ import annotations

from wsnake.cli import main

if __name__ == "__main__":
    main()
