from __future__ import annotations

import logging
import os
from pathlib import Path

from .adapter import EntryType, Listing, ProjectStorage

logger = logging.getLogger(__name__)


def entry_type_of(path: Path) -> EntryType:
    # is_file/is_dir follow symlinks, so only dangling links end up as SYMLINK
    if path.is_file():
        return EntryType.FILE
    if path.is_dir():
        return EntryType.DIRECTORY
    if path.is_symlink():
        return EntryType.SYMLINK
    return EntryType.UNKNOWN


def _raise(exc: OSError) -> None:
    # os.walk swallows scandir errors unless onerror re-raises them
    raise exc


class FilesystemStorage(ProjectStorage):
    backend: str = "filesystem"

    def __init__(self) -> None:
        self._root: Path | None = None

    @property
    def root(self) -> Path | None:
        return self._root

    def open(self, path: str) -> bool:
        candidate = Path(path)
        if not candidate.is_dir():
            logger.debug("Storage root is not a directory", extra={"path": path})
            return False
        self._root = candidate
        return True

    def close(self) -> bool:
        if self._root is None:
            return False
        self._root = None
        return True

    @property
    def is_open(self) -> bool:
        return self._root is not None

    def list(self) -> Listing:
        self._ensure_open()
        assert self._root is not None
        entries: Listing = {}
        for current, dirnames, filenames in os.walk(self._root, onerror=_raise):
            base = Path(current)
            for name in (*dirnames, *filenames):
                path = base / name
                key = path.relative_to(self._root).as_posix()
                entries[key] = entry_type_of(path)
        return entries

    def read_file(self, name: str) -> str:
        self._ensure_open()
        assert self._root is not None
        path = self._root / name
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return ""

    def save_file(self, name: str, contents: str) -> None:
        self._ensure_open()
        assert self._root is not None
        path = self._root / name
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(contents)
        logger.debug("File saved", extra={"path": str(path), "size": len(contents)})


__all__ = ["FilesystemStorage", "entry_type_of"]
