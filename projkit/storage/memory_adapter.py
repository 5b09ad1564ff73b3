from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable, Mapping

from .adapter import EntryType, Listing, ProjectStorage


class InMemoryStorage(ProjectStorage):
    """Dictionary-backed storage; roots must be registered before they can be opened.

    Every call is appended to ``calls`` as ``(method, *args)`` so callers can
    inspect the exact interaction sequence.
    """

    backend: str = "memory"

    def __init__(self, roots: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._roots: dict[str, dict[str, str]] = {
            root: dict(files) for root, files in (roots or {}).items()
        }
        self._root: str | None = None
        self.calls: list[tuple[object, ...]] = []

    def add_root(self, root: str, files: Mapping[str, str] | None = None) -> None:
        self._roots[root] = dict(files or {})

    def files(self, root: str) -> dict[str, str]:
        return dict(self._roots[root])

    def open(self, path: str) -> bool:
        self.calls.append(("open", path))
        if path not in self._roots:
            return False
        self._root = path
        return True

    def close(self) -> bool:
        self.calls.append(("close",))
        if self._root is None:
            return False
        self._root = None
        return True

    @property
    def is_open(self) -> bool:
        return self._root is not None

    def list(self) -> Listing:
        self.calls.append(("list",))
        files = self._bound_files()
        entries: Listing = {}
        for name in files:
            for parent in _parents(name):
                entries[parent] = EntryType.DIRECTORY
            entries[name] = EntryType.FILE
        return entries

    def read_file(self, name: str) -> str:
        self.calls.append(("read_file", name))
        return self._bound_files().get(name, "")

    def save_file(self, name: str, contents: str) -> None:
        self.calls.append(("save_file", name, contents))
        self._bound_files()[name] = contents

    def _bound_files(self) -> dict[str, str]:
        self._ensure_open()
        assert self._root is not None
        return self._roots[self._root]


def _parents(name: str) -> Iterable[str]:
    parents = PurePosixPath(name).parents
    return [p.as_posix() for p in parents if p.as_posix() != "."]


__all__ = ["InMemoryStorage"]
