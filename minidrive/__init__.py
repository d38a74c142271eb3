"""Client-side building blocks for a small remote file drive: configuration, logging, transfer state, remote paths and prompt helpers."""

__version__ = "0.1.0"

__all__ = ["config", "logger", "transfer_state", "remote_paths", "shell"]