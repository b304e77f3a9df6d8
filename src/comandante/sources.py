"""Line sources feeding the input loop."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable
from typing import Protocol

_CLOSED = object()


class InputSource(Protocol):
    def next_line(self) -> str | None:
        """Block until a line is available; None means end of stream."""

    def close(self) -> None:
        """Wake any blocked reader and end the stream."""


class ConsoleInputSource:
    """Read lines from standard input."""

    def __init__(self, prompt: str = "") -> None:
        self.prompt = prompt
        self._closed = threading.Event()

    def next_line(self) -> str | None:
        if self._closed.is_set():
            return None
        try:
            return input(self.prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    def close(self) -> None:
        # A blocked input() call is not interruptible; the next read returns None.
        self._closed.set()


class IterableInputSource:
    """Serve a fixed sequence of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._lock = threading.Lock()
        self._closed = False

    def next_line(self) -> str | None:
        with self._lock:
            if self._closed:
                return None
            return next(self._lines, None)

    def close(self) -> None:
        with self._lock:
            self._closed = True


class QueueInputSource:
    """Thread-safe source that other tasks push lines into."""

    def __init__(self) -> None:
        self._queue: queue.Queue[object] = queue.Queue()
        self._closed = threading.Event()

    def put(self, line: str) -> None:
        if self._closed.is_set():
            raise ValueError("input source is closed")
        self._queue.put(line)

    def next_line(self) -> str | None:
        if self._closed.is_set():
            return None
        item = self._queue.get()
        if item is _CLOSED:
            return None
        return str(item)

    def close(self) -> None:
        if self._closed.is_set():
            return
        self._closed.set()
        self._queue.put(_CLOSED)
