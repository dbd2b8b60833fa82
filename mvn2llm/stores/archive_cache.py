"""Persistent on-disk cache for downloaded source archives."""

from __future__ import annotations

from datetime import UTC, datetime
import hashlib
import json
import os
from pathlib import Path
from typing import Dict, Optional

_CACHE_VERSION = 1
_INDEX_FILENAME = "index.json"

DEFAULT_CACHE_DIR = Path("~/.cache/mvn2llm")


class ArchiveCache:
    """Stores archives by repository-relative path, indexed by source URL."""

    def __init__(self, root: Path) -> None:
        self.root = root.expanduser()
        self._index_path = self.root / _INDEX_FILENAME
        self._entries: Dict[str, Dict[str, object]] = {}
        self._dirty = False
        self._load(self._index_path)

    def get(self, url: str) -> Optional[Path]:
        """Return the cached archive for `url` if it is present and intact."""
        entry = self._entries.get(url)
        if not entry:
            return None
        relative = entry.get("path")
        if not isinstance(relative, str):
            return None
        path = self.root / relative
        try:
            size = path.stat().st_size
        except OSError:
            return None
        if entry.get("size") != size:
            return None
        if entry.get("sha256") != _hash_file(path):
            return None
        return path

    def store(self, url: str, relative_path: str, data: bytes) -> Path:
        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        partial = path.with_name(path.name + ".part")
        partial.write_bytes(data)
        os.replace(partial, path)
        self._entries[url] = {
            "path": relative_path,
            "size": len(data),
            "sha256": hashlib.sha256(data).hexdigest(),
            "fetched_at": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
        }
        self._dirty = True
        return path

    def persist(self) -> None:
        if not self._dirty:
            return
        payload = {
            "version": _CACHE_VERSION,
            "entries": self._entries,
        }
        self.root.mkdir(parents=True, exist_ok=True)
        self._index_path.write_text(
            json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8"
        )
        self._dirty = False

    def clear(self) -> None:
        for entry in self._entries.values():
            relative = entry.get("path")
            if isinstance(relative, str):
                (self.root / relative).unlink(missing_ok=True)
        self._entries.clear()
        self._dirty = True

    # ------------------------------------------------------------------
    # Internal helpers

    def _load(self, path: Path) -> None:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return
        except (OSError, json.JSONDecodeError):
            return
        if not isinstance(data, dict) or data.get("version") != _CACHE_VERSION:
            return
        entries = data.get("entries")
        if not isinstance(entries, dict):
            return
        valid_entries: Dict[str, Dict[str, object]] = {}
        for key, raw in entries.items():
            if not isinstance(key, str) or not isinstance(raw, dict):
                continue
            if "path" not in raw or "size" not in raw or "sha256" not in raw:
                continue
            valid_entries[key] = raw
        self._entries = valid_entries
        self._dirty = False


def _hash_file(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


__all__ = ["ArchiveCache", "DEFAULT_CACHE_DIR"]
