"""Plain console shell for comandante."""

from __future__ import annotations

import logging

from rich.console import Console

from .config import ShellConfig, load_config
from .context import CommandContext
from .sources import ConsoleInputSource


def configure_logging(config: ShellConfig) -> None:
    logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


def build_context(config: ShellConfig, console: Console | None = None) -> CommandContext:
    return CommandContext(
        ConsoleInputSource(config.prompt),
        console=console,
        register_builtins=config.register_builtins,
    )


def main(config: ShellConfig | None = None) -> None:
    config = config or load_config()
    configure_logging(config)

    context = build_context(config)
    context.console.print(config.banner, markup=False, highlight=False)
    context.start()
    try:
        context.join()
    except KeyboardInterrupt:
        context.stop(timeout=1.0)
    context.console.print()


if __name__ == "__main__":
    main()
