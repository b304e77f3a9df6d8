"""UI adapter that runs submitted lines and keeps a transcript."""

from __future__ import annotations

from dataclasses import dataclass

from ..context import CommandContext
from ..errors import CommandSyntaxError

INPUT_MARKER = "> "
MAX_TRANSCRIPT_LINES = 500


@dataclass(frozen=True)
class ShellSnapshot:
    """Immutable UI state for rendering."""

    transcript: tuple[str, ...]
    status: str
    commands: tuple[str, ...]


class ShellController:
    """Runs one dispatch per submitted line on the caller's thread."""

    def __init__(self, context: CommandContext) -> None:
        self.context = context
        self._transcript: list[str] = []
        self._status = "ready"

    def submit(self, raw: str) -> str:
        line = raw.rstrip("\n")
        if not line.strip():
            self._status = "empty command"
            return self._status

        self._append(INPUT_MARKER + line)
        try:
            with self.context.console.capture() as capture:
                result = self.context.dispatch(line)
        except CommandSyntaxError as exc:
            self._append(f"error: {exc}")
            self._status = "command not found"
            return self._status
        except Exception as exc:
            self._append(f"command error: {exc}")
            self._status = "command failed"
            return self._status

        output = capture.get().rstrip("\n")
        if output:
            self._append(*output.splitlines())
        elif result is not None:
            self._append(str(result))
        self._status = "ok"
        return self._status

    def snapshot(self) -> ShellSnapshot:
        return ShellSnapshot(
            transcript=tuple(self._transcript),
            status=self._status,
            commands=tuple(sorted(self.context.list_execution_commands())),
        )

    def _append(self, *lines: str) -> None:
        self._transcript.extend(lines)
        overflow = len(self._transcript) - MAX_TRANSCRIPT_LINES
        if overflow > 0:
            del self._transcript[:overflow]
