"""Optional file log for client activity."""

from __future__ import annotations

import os
import threading
import time
from typing import IO


def _format_part(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Logger:
    """Writes tagged lines to a file, or nothing when no path is given.

    The file is truncated when opened. If it cannot be opened, logging is
    silently disabled.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._lock = threading.Lock()
        self._stream: IO[str] | None = None
        if path is not None:
            try:
                self._stream = open(path, "w", encoding="utf-8")
            except OSError:
                self._stream = None

    def log(self, tag: str, *args: object) -> None:
        """Append one line: the tag in brackets followed by the joined arguments."""
        with self._lock:
            if self._stream is None:
                return
            message = "".join(_format_part(arg) for arg in args)
            timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
            try:
                self._stream.write(f"{timestamp} [info] [{tag}] {message}\n")
                self._stream.flush()
            except OSError:
                pass

    def close(self) -> None:
        """Close the log file; later calls to :meth:`log` do nothing."""
        with self._lock:
            if self._stream is not None:
                self._stream.close()
                self._stream = None

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()