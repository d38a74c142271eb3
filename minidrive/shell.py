"""Interactive-shell helpers: command parsing, prompts, transfer targets and throttling."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

_WHITESPACE = " \t\r\n"
_DEFAULT_DOWNLOAD_NAME = "downloaded_file"
_PART_SUFFIX = ".part"

_HELP_LINES = (
    "Available commands:",
    "  HELP                      Show this help",
    "  EXIT                      Disconnect and exit",
    "  LIST [path]               List directory contents",
    "  STAT <path>               Show metadata for a path",
    "  CD <path>                 Change current remote directory",
    "  MKDIR <path>              Create a directory",
    "  RMDIR <path>              Remove an empty directory",
    "  MOVE <src> <dst>          Move or rename an entry",
    "  COPY <src> <dst>          Copy an entry",
    "  DELETE <path>             Delete a file",
    "  UPLOAD <local> [remote]   Upload a file to the server",
    "  DOWNLOAD <remote> [local] Download a file",
    "  SYNC <local> <remote>     Synchronize local directory to remote",
    "",
    "Flags:",
    "  --log <file>              Append structured logs to file",
    "  --max-upload-rate <bps>   Throttle uploads (bytes per second)",
    "  --max-download-rate <bps> Throttle downloads (bytes per second)",
)

_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def _ascii_upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


def _final_component(path: str) -> str:
    """Text after the last separator, empty when the path ends with one."""
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    cut = max(path.rfind(sep) for sep in separators)
    return path[cut + 1:]


@dataclass(frozen=True)
class ParsedCommand:
    """A shell command word, upper-cased, and its arguments."""

    command: str
    args: tuple[str, ...] = ()


def parse_command_line(line: str) -> ParsedCommand | None:
    """Split a shell line into command and arguments; ``None`` for a blank line."""
    tokens = line.strip(_WHITESPACE).split()
    if not tokens:
        return None
    head, *rest = tokens
    return ParsedCommand(_ascii_upper(head), tuple(rest))


def _stdin_line() -> str | None:
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\n")


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def ask_yes_no(
    question: str,
    read_line: Callable[[], str | None] | None = None,
    write: Callable[[str], object] | None = None,
) -> bool:
    """Ask until the answer is yes or no; end of input counts as no.

    ``read_line`` returns the next line of input or ``None`` at end of input.
    """
    read = read_line if read_line is not None else _stdin_line
    out = write if write is not None else _stdout_write
    while True:
        out(f"{question} (y/n): ")
        answer = read()
        if answer is None:
            return False
        answer = _ascii_upper(answer).strip(_WHITESPACE)
        if answer in ("Y", "YES"):
            return True
        if answer in ("N", "NO"):
            return False
        out("Please answer y or n.\n")


def help_text() -> str:
    """The text shown for the HELP command."""
    return "\n".join(_HELP_LINES) + "\n"


def upload_target(args: list[str] | tuple[str, ...]) -> tuple[Path, str]:
    """Local file and unresolved remote target for an UPLOAD command.

    Without a remote argument the local file name is used; if that is empty,
    the local argument itself.
    """
    if not args or len(args) > 2:
        raise ValueError("Usage: UPLOAD <local_path> [remote_path]")
    local_text = args[0]
    remote = args[1] if len(args) == 2 else _final_component(local_text)
    if not remote:
        remote = local_text
    return Path(local_text), remote


def download_target(args: list[str] | tuple[str, ...]) -> tuple[str, Path]:
    """Unresolved remote path and local target for a DOWNLOAD command.

    Without a local argument the remote file name is used, or
    ``downloaded_file`` when the remote path has none.
    """
    if not args or len(args) > 2:
        raise ValueError("Usage: DOWNLOAD <remote_path> [local_path]")
    remote = args[0]
    if len(args) == 2:
        return remote, Path(args[1])
    name = _final_component(remote)
    return remote, Path(name or _DEFAULT_DOWNLOAD_NAME)


def rate_limit_delay(rate: int | None, nbytes: int, elapsed: float) -> float:
    """Seconds to wait so that ``nbytes`` in ``elapsed`` seconds stays within ``rate``."""
    if not rate or nbytes == 0:
        return 0.0
    expected = nbytes / rate
    return expected - elapsed if elapsed < expected else 0.0


def apply_rate_limit(rate: int | None, nbytes: int, start_time: float) -> float:
    """Sleep as needed after a transfer that began at ``start_time`` (monotonic clock).

    Returns the number of seconds slept.
    """
    delay = rate_limit_delay(rate, nbytes, time.monotonic() - start_time)
    if delay > 0:
        time.sleep(delay)
    return delay


def partial_download_path(local_path: str | os.PathLike[str]) -> Path:
    """Where a download into ``local_path`` is kept until it is complete."""
    return Path(os.fspath(local_path) + _PART_SUFFIX)