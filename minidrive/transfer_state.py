"""Persistent record of unfinished uploads and downloads."""

from __future__ import annotations

import dataclasses
import json
import os
from dataclasses import dataclass
from pathlib import Path

_UPLOAD = "upload"
_DOWNLOAD = "download"


@dataclass
class TransferEntry:
    """One unfinished transfer belonging to a user identity."""

    kind: str
    identity: str
    local_path: Path
    remote_path: str
    total_size: int = 0
    bytes_transferred: int = 0


def default_state_path() -> Path:
    """Location of the transfer state file for the current user."""
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "MiniDrive" / "transfers.json"
    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".minidrive" / "transfers.json"
    return Path(".minidrive") / "transfers.json"


def _normalize_path(path: str | os.PathLike[str]) -> Path:
    return Path(os.path.normpath(os.path.abspath(os.fspath(path))))


class TransferStateStore:
    """Keeps transfer entries in a JSON file, saving after every change."""

    def __init__(self, state_path: str | os.PathLike[str] | None = None) -> None:
        self.state_path = Path(state_path) if state_path is not None else default_state_path()
        self._entries: list[TransferEntry] = []
        self._load()

    def pending_for_identity(self, identity: str) -> list[TransferEntry]:
        """Copies of all entries recorded for ``identity``, in stored order."""
        return [dataclasses.replace(entry) for entry in self._entries if entry.identity == identity]

    def upsert_upload(self, identity, local_path, remote_path, total_size) -> None:
        self._upsert(_UPLOAD, identity, local_path, remote_path, total_size)

    def upsert_download(self, identity, local_path, remote_path, total_size, bytes_transferred) -> None:
        self._upsert(_DOWNLOAD, identity, local_path, remote_path, total_size)
        self._update_progress(_DOWNLOAD, identity, local_path, remote_path, bytes_transferred)

    def update_upload_progress(self, identity, local_path, remote_path, bytes_transferred) -> None:
        self._update_progress(_UPLOAD, identity, local_path, remote_path, bytes_transferred)

    def update_download_progress(self, identity, local_path, remote_path, bytes_transferred) -> None:
        self._update_progress(_DOWNLOAD, identity, local_path, remote_path, bytes_transferred)

    def remove_upload(self, identity, local_path, remote_path) -> None:
        self._remove(_UPLOAD, identity, local_path, remote_path)

    def remove_download(self, identity, local_path, remote_path) -> None:
        self._remove(_DOWNLOAD, identity, local_path, remote_path)

    def discard_identity(self, identity: str) -> None:
        """Forget every entry of ``identity``."""
        self._entries = [entry for entry in self._entries if entry.identity != identity]
        self._save()

    def _load(self) -> None:
        self._entries = []
        if not self.state_path.exists():
            return
        try:
            text = self.state_path.read_text(encoding="utf-8")
        except OSError:
            return
        data = json.loads(text)
        if not isinstance(data, list):
            return
        for item in data:
            if not isinstance(item, dict):
                raise ValueError("transfer state entries must be JSON objects")
            entry = TransferEntry(
                kind=str(item.get("type", "")),
                identity=str(item.get("identity", "")),
                local_path=_normalize_path(str(item.get("local", ""))),
                remote_path=str(item.get("remote", "")),
                total_size=int(item.get("total", 0)),
                bytes_transferred=int(item.get("bytes", 0)),
            )
            if entry.kind and entry.identity:
                self._entries.append(entry)

    def _save(self) -> None:
        records = [
            {
                "type": entry.kind,
                "identity": entry.identity,
                "local": entry.local_path.as_posix(),
                "remote": entry.remote_path,
                "total": entry.total_size,
                "bytes": entry.bytes_transferred,
            }
            for entry in self._entries
        ]
        try:
            self.state_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        try:
            self.state_path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError:
            pass

    def _find(self, kind, identity, local_path, remote_path) -> TransferEntry | None:
        normalized = _normalize_path(local_path)
        return next(
            (
                entry
                for entry in self._entries
                if entry.kind == kind
                and entry.identity == identity
                and entry.local_path == normalized
                and entry.remote_path == remote_path
            ),
            None,
        )

    def _upsert(self, kind, identity, local_path, remote_path, total_size) -> None:
        entry = self._find(kind, identity, local_path, remote_path)
        if entry is None:
            self._entries.append(
                TransferEntry(kind, identity, _normalize_path(local_path), remote_path, total_size, 0)
            )
        else:
            entry.total_size = total_size
        self._save()

    def _update_progress(self, kind, identity, local_path, remote_path, bytes_transferred) -> None:
        entry = self._find(kind, identity, local_path, remote_path)
        if entry is not None:
            entry.bytes_transferred = bytes_transferred
            self._save()

    def _remove(self, kind, identity, local_path, remote_path) -> None:
        entry = self._find(kind, identity, local_path, remote_path)
        if entry is not None:
            self._entries.remove(entry)
            self._save()