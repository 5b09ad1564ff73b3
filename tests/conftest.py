from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from projkit.storage.adapter import EntryType, StorageNotOpenError


@dataclass
class FakeStorage:
    """Scripted storage recording every call in order."""

    open_result: bool = True
    listing: dict[str, EntryType] = field(default_factory=dict)
    contents: str = ""
    opened: bool = False
    calls: list[tuple] = field(default_factory=list)
    saved: list[tuple[str, str]] = field(default_factory=list)

    def open(self, path: str) -> bool:
        self.calls.append(("open", path))
        self.opened = self.open_result
        return self.open_result

    def close(self) -> bool:
        self.calls.append(("close",))
        was_open = self.opened
        self.opened = False
        return was_open

    @property
    def is_open(self) -> bool:
        return self.opened

    def list(self) -> dict[str, EntryType]:
        self.calls.append(("list",))
        if not self.opened:
            raise StorageNotOpenError()
        return dict(self.listing)

    def read_file(self, name: str) -> str:
        self.calls.append(("read_file", name))
        if not self.opened:
            raise StorageNotOpenError()
        return self.contents

    def save_file(self, name: str, contents: str) -> None:
        self.calls.append(("save_file", name, contents))
        if not self.opened:
            raise StorageNotOpenError()
        self.saved.append((name, contents))


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    root = tmp_path / "projects"
    root.mkdir()
    return root
