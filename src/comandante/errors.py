"""Exceptions raised while dispatching command lines."""

from __future__ import annotations


class CommandSyntaxError(Exception):
    """Structural failure while turning a command line into a call."""

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class CommandNotFoundError(CommandSyntaxError):
    """No registered command matches the command line."""


class CommandRunningError(RuntimeError):
    """The input loop of a context was started twice."""
