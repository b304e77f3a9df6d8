"""Textual TUI application for comandante."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Static

from ..config import ShellConfig
from ..context import CommandContext
from .controller import ShellController


class ComandanteTuiApp(App[None]):
    """Core Textual frontend: a transcript above a command line."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #transcript {
        height: 1fr;
        padding: 0 1;
    }

    #status {
        height: 1;
        padding: 0 1;
        background: $panel;
        color: $text;
    }

    #command {
        height: 3;
        margin: 0 1 1 1;
    }
    """

    BINDINGS = [Binding("ctrl+q", "quit", "Quit", priority=True)]

    def __init__(self, context: CommandContext | None = None, config: ShellConfig | None = None) -> None:
        super().__init__()
        self.config = config or ShellConfig()
        self.context = context or CommandContext()
        if self.config.register_builtins:
            self.context.install_builtins()
        self.controller = ShellController(self.context)
        self._quit_requested = False

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def compose(self) -> ComposeResult:
        yield Static(id="transcript")
        yield Static(id="status")
        yield Input(placeholder=self.config.prompt.strip(), id="command")

    def on_mount(self) -> None:
        self.query_one("#command", Input).focus()
        self._refresh_view()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "command":
            return
        self.controller.submit(event.value)
        event.input.value = ""
        self._refresh_view()

    async def action_quit(self) -> None:
        self._quit_requested = True
        self.exit()

    def _refresh_view(self) -> None:
        snapshot = self.controller.snapshot()
        body = "\n".join(snapshot.transcript) if snapshot.transcript else self.config.banner
        self.query_one("#transcript", Static).update(
            Panel(Text(body), title="comandante", border_style="white")
        )
        self.query_one("#status", Static).update(
            Text(f"commands={len(snapshot.commands)} | {snapshot.status}")
        )
