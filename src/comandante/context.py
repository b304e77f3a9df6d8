"""Process-level command context and its input loop."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from rich.console import Console

from .builtins import register_builtin_commands
from .dispatcher import Dispatcher
from .errors import CommandRunningError
from .register import CommandBuilder, CommandRegister
from .sources import InputSource

Reporter = Callable[[BaseException], None]
logger = logging.getLogger(__name__)


def console_reporter(console: Console | None = None) -> Reporter:
    """Build a reporter that prints dispatch failures in red."""
    target = console or Console(stderr=True)

    def report(exc: BaseException) -> None:
        target.print(str(exc), style="red", markup=False, highlight=False)

    return report


class CommandContext:
    """Command tree, dispatcher and one background input loop.

    Build one per process and pass it to whoever registers commands.
    """

    def __init__(
        self,
        input_source: InputSource | None = None,
        *,
        register: CommandRegister | None = None,
        reporter: Reporter | None = None,
        console: Console | None = None,
        register_builtins: bool = True,
    ) -> None:
        self.input_source = input_source
        self.register = register or CommandRegister()
        self.dispatcher = Dispatcher(self.register)
        self.console = console or Console()
        self.reporter = reporter or console_reporter()
        self.register_builtins = register_builtins
        self._stop = threading.Event()
        self._start_lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._builtins_installed = False

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def started(self) -> bool:
        return self._thread is not None

    def builder(self) -> CommandBuilder:
        return self.register.builder()

    def list_execution_commands(self) -> set[str]:
        return self.register.list_execution_commands()

    def dispatch(self, line: str) -> object:
        return self.dispatcher.dispatch(line)

    def install_builtins(self) -> None:
        if self._builtins_installed:
            return
        register_builtin_commands(self.register, self.console)
        self._builtins_installed = True

    def start(self) -> None:
        """Start the input loop thread; a context starts at most once."""
        with self._start_lock:
            if self._thread is not None:
                raise CommandRunningError("Command context is already running.")
            if self.input_source is None:
                raise ValueError("command context has no input source")
            if self.register_builtins:
                self.install_builtins()
            self._thread = threading.Thread(
                target=self._run, name="comandante-input", daemon=True
            )
            self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Ask the loop to finish and wait up to TIMEOUT seconds for it."""
        self._stop.set()
        close = getattr(self.input_source, "close", None)
        if callable(close):
            close()
        self.join(timeout)

    def join(self, timeout: float | None = None) -> None:
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self) -> None:
        while not self._stop.is_set():
            line = self.input_source.next_line()
            if line is None or self._stop.is_set():
                break
            self.run_line(line)
        logger.debug("input loop finished")

    def run_line(self, line: str) -> None:
        """Dispatch LINE, reporting instead of raising any failure."""
        try:
            self.dispatcher.dispatch(line)
        except Exception as exc:
            logger.warning("dispatch failed for %r: %s", line, exc)
            self.reporter(exc)
