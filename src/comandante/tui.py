"""TUI entrypoint."""

from __future__ import annotations

from .config import ShellConfig
from .ui.app import ComandanteTuiApp


def run_tui(config: ShellConfig | None = None) -> None:
    app = ComandanteTuiApp(config=config)
    app.run()
