"""Allows ``python -m mcuserdata``."""

from __future__ import annotations

from mcuserdata.cli.main import run

if __name__ == "__main__":
    run()
