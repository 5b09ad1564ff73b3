from __future__ import annotations

import os
from pathlib import Path

import pytest

from projkit.storage.adapter import EntryType, ProjectStorage, StorageNotOpenError
from projkit.storage.filesystem_adapter import FilesystemStorage


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = tmp_path / "proj"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    (root / ".gitignore").write_text("*.pyc\n", encoding="utf-8")
    return root


def test_storage_is_abstract() -> None:
    with pytest.raises(TypeError):
        ProjectStorage()  # type: ignore[abstract]


def test_open_requires_existing_directory(tmp_path: Path, project_dir: Path) -> None:
    storage = FilesystemStorage()

    assert not storage.open(str(tmp_path / "missing"))
    assert not storage.open(str(project_dir / ".gitignore"))
    assert not storage.is_open

    assert storage.open(str(project_dir))
    assert storage.is_open
    assert storage.root == project_dir


def test_failed_open_keeps_previous_binding(tmp_path: Path, project_dir: Path) -> None:
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    assert not storage.open(str(tmp_path / "missing"))
    assert storage.root == project_dir


def test_close_reports_previous_state(project_dir: Path) -> None:
    storage = FilesystemStorage()
    assert not storage.close()

    storage.open(str(project_dir))
    assert storage.close()
    assert not storage.is_open
    assert not storage.close()


@pytest.mark.parametrize(
    "operation",
    [
        lambda s: s.list(),
        lambda s: s.read_file("settings.toml"),
        lambda s: s.save_file("settings.toml", "verbose=1"),
    ],
)
def test_operations_require_open_storage(operation) -> None:
    with pytest.raises(StorageNotOpenError, match="Project is not open."):
        operation(FilesystemStorage())


def test_list_walks_recursively_with_relative_keys(project_dir: Path) -> None:
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    assert storage.list() == {
        ".git": EntryType.DIRECTORY,
        ".git/HEAD": EntryType.FILE,
        ".gitignore": EntryType.FILE,
    }


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="needs POSIX symlinks")
def test_list_classifies_symlinks(project_dir: Path) -> None:
    (project_dir / "link_to_file").symlink_to(project_dir / ".gitignore")
    (project_dir / "link_to_dir").symlink_to(project_dir / ".git", target_is_directory=True)
    (project_dir / "dangling").symlink_to(project_dir / "nowhere")
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    listing = storage.list()

    assert listing["link_to_file"] is EntryType.FILE
    assert listing["link_to_dir"] is EntryType.DIRECTORY
    assert listing["dangling"] is EntryType.SYMLINK
    assert "link_to_dir/HEAD" not in listing


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs FIFOs")
def test_list_marks_special_files_unknown(project_dir: Path) -> None:
    os.mkfifo(project_dir / "pipe")
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    assert storage.list()["pipe"] is EntryType.UNKNOWN


def test_read_missing_file_returns_empty(project_dir: Path) -> None:
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    assert storage.read_file("settings.toml") == ""


def test_save_overwrites_whole_file(project_dir: Path) -> None:
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    storage.save_file("settings.toml", "verbose=10\nextra=1")
    storage.save_file("settings.toml", "verbose=2")

    assert (project_dir / "settings.toml").read_text(encoding="utf-8") == "verbose=2"
    assert storage.read_file("settings.toml") == "verbose=2"


def test_save_into_missing_directory_raises(project_dir: Path) -> None:
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    with pytest.raises(OSError):
        storage.save_file("missing/settings.toml", "verbose=1")


def test_read_replaces_undecodable_bytes(project_dir: Path) -> None:
    (project_dir / "notes.txt").write_bytes(b"caf\xe9\nok")
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    assert storage.read_file("notes.txt") == "caf�\nok"


def test_list_propagates_walk_errors(project_dir: Path, monkeypatch) -> None:
    storage = FilesystemStorage()
    storage.open(str(project_dir))

    def denied(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(os, "scandir", denied)

    with pytest.raises(PermissionError):
        storage.list()
