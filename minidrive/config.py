"""Command-line configuration for the client."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

USAGE = "Usage: client [username@]<server>:<port> [--log <file>]"

_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT64_MAX = 2**64 - 1


class ConfigError(ValueError):
    """Raised when the command line cannot be turned into a configuration."""


@dataclass
class ClientConfig:
    """Connection and transfer settings for one client run."""

    host: str = ""
    port: int = 0
    username: str | None = None
    log_path: Path | None = None
    max_upload_rate: int | None = None
    max_download_rate: int | None = None


def _leading_int(text: str, what: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ConfigError(f"Invalid {what}: {text!r}")
    value = int(match.group(2))
    return -value if match.group(1) == "-" else value


def _parse_port(text: str) -> int:
    value = _leading_int(text, "port")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ConfigError(f"Port out of range: {text!r}")
    return value % 2**16


def _parse_rate(text: str) -> int:
    value = _leading_int(text, "rate")
    if abs(value) > _UINT64_MAX:
        raise ConfigError(f"Rate out of range: {text!r}")
    return value % 2**64


_OPTIONS: dict[str, tuple[str, str, Callable[[str], object]]] = {
    "--log": ("log_path", "--log requires a file path", Path),
    "--max-upload-rate": (
        "max_upload_rate",
        "--max-upload-rate requires a value (bytes per second)",
        _parse_rate,
    ),
    "--max-download-rate": (
        "max_download_rate",
        "--max-download-rate requires a value (bytes per second)",
        _parse_rate,
    ),
}


def parse_arguments(argv: Sequence[str] | None = None) -> ClientConfig:
    """Build a :class:`ClientConfig` from arguments (program name excluded)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise ConfigError(USAGE)

    config = ClientConfig()
    endpoint, *options = args

    username, at, host_part = endpoint.partition("@")
    if at:
        config.username = username
    else:
        host_part = endpoint

    host, colon, port_text = host_part.partition(":")
    if not colon:
        raise ConfigError("Expected endpoint format host:port")
    config.host = host
    config.port = _parse_port(port_text)

    remaining = iter(options)
    for arg in remaining:
        spec = _OPTIONS.get(arg)
        if spec is None:
            raise ConfigError(f"Unknown argument: {arg}")
        attribute, missing_message, convert = spec
        value = next(remaining, None)
        if value is None:
            raise ConfigError(missing_message)
        setattr(config, attribute, convert(value))

    return config