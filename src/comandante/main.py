"""Top-level CLI entrypoint dispatcher."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from . import cli
from .config import load_config
from .tui import run_tui


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="comandante")
    parser.add_argument("--plain", action="store_true", help="read commands from standard input")
    parser.add_argument("--config", metavar="PATH", help="JSON settings file")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.plain:
        cli.main(config)
        return
    run_tui(config)
