from __future__ import annotations

import abc
import enum


class StorageError(Exception):
    """Base class for all storage errors surfaced to the project layer."""


class StorageNotOpenError(StorageError):
    """A storage operation was invoked while no location is bound."""

    def __init__(self, message: str = "Project is not open.") -> None:
        super().__init__(message)


class EntryType(enum.Enum):
    UNKNOWN = "unknown"
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


Listing = dict[str, EntryType]


class ProjectStorage(abc.ABC):
    """Capability interface over the place where a project's files live."""

    @abc.abstractmethod
    def open(self, path: str) -> bool:
        """Bind to ``path``. Returns False (never raises) if it is not usable."""

    @abc.abstractmethod
    def close(self) -> bool:
        """Release the binding. Returns whether the storage was open."""

    @property
    @abc.abstractmethod
    def is_open(self) -> bool:
        ...

    @abc.abstractmethod
    def list(self) -> Listing:
        """Return every entry under the bound location, recursively."""

    @abc.abstractmethod
    def read_file(self, name: str) -> str:
        """Return the text contents of ``name``; empty if the file is absent."""

    @abc.abstractmethod
    def save_file(self, name: str, contents: str) -> None:
        """Create or overwrite ``name`` with ``contents``."""

    def _ensure_open(self) -> None:
        if not self.is_open:
            raise StorageNotOpenError()


__all__ = [
    "EntryType",
    "Listing",
    "ProjectStorage",
    "StorageError",
    "StorageNotOpenError",
]
