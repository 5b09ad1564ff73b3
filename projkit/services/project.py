from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional

from projkit.core.errors import ProjectNotFoundError
from projkit.lib.paths import DEFAULT_PROJECTS_ROOT, resolve_project_path
from projkit.services.settings_format import (
    DEFAULT_VERBOSITY,
    SETTINGS_FILENAME,
    format_settings,
    parse_verbosity,
)
from projkit.storage.adapter import ProjectStorage


class Project:
    """A named project bound to exclusively-owned storage.

    Opening binds the storage to ``projects_root + name`` and loads the
    settings file if one exists; otherwise the default verbosity is kept and
    marked unsaved. ``close()`` (or leaving a ``with`` block) writes unsaved
    settings and then always closes the storage.
    """

    DEFAULT_VERBOSITY = DEFAULT_VERBOSITY
    SETTINGS_FILENAME = SETTINGS_FILENAME

    def __init__(
        self,
        name: str,
        storage: ProjectStorage,
        *,
        projects_root: str = DEFAULT_PROJECTS_ROOT,
    ) -> None:
        self._name = name
        self._storage = storage
        self._path = resolve_project_path(name, projects_root)
        self._verbosity = DEFAULT_VERBOSITY
        self._unsaved_settings = True
        self._closed = False
        self._logger = logging.getLogger(__name__)

        context = self._operation_context("open_project")
        self._logger.info("Opening project", extra=context)
        if not self._storage.open(self._path):
            self._closed = True
            self._logger.warning("Project directory missing", extra=context)
            raise ProjectNotFoundError(name, self._path)

        try:
            self._read_settings()
        except Exception:
            self._logger.error("Reading project settings failed", extra=context, exc_info=True)
            self._closed = True
            self._storage.close()
            raise
        self._logger.info(
            "Project opened",
            extra={
                **context,
                "verbosity": self._verbosity,
                "settings_dirty": self._unsaved_settings,
            },
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_open(self) -> bool:
        return not self._closed

    @property
    def settings_dirty(self) -> bool:
        return self._unsaved_settings

    @property
    def verbosity(self) -> int:
        return self._verbosity

    @verbosity.setter
    def verbosity(self, value: int) -> None:
        self._verbosity = value
        self._unsaved_settings = True

    def get_verbosity(self) -> int:
        return self.verbosity

    def set_verbosity(self, verbosity: int) -> None:
        self.verbosity = verbosity

    def close(self) -> None:
        """Flush unsaved settings and release the storage. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        try:
            if self._unsaved_settings:
                self._write_settings()
        finally:
            self._storage.close()
            self._logger.info("Project closed", extra=self._operation_context("close_project"))

    def __enter__(self) -> "Project":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"Project(name={self._name!r}, path={self._path!r}, {state})"

    def _read_settings(self) -> bool:
        if SETTINGS_FILENAME not in self._storage.list():
            self._logger.info(
                "Settings file missing, keeping defaults",
                extra=self._operation_context("read_settings"),
            )
            return False
        verbosity = parse_verbosity(self._storage.read_file(SETTINGS_FILENAME))
        if verbosity is not None:
            self._verbosity = verbosity
            self._unsaved_settings = False
        return True

    def _write_settings(self) -> None:
        self._storage.save_file(SETTINGS_FILENAME, format_settings(self._verbosity))
        self._unsaved_settings = False
        self._logger.info(
            "Settings written",
            extra={**self._operation_context("write_settings"), "verbosity": self._verbosity},
        )

    def _operation_context(self, operation: str) -> dict[str, object]:
        return {"operation": operation, "project": self._name, "path": self._path}


__all__ = ["Project"]
