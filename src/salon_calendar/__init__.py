"""Salon Calendar: event booking admin calendar backed by a remote events API."""

from __future__ import annotations

__all__ = ["main"]


def main() -> None:
    from .cli import main as cli_main

    cli_main()
