"""Path and environment configuration for projkit.

- Resolves the parent directory that holds all projects
- Builds a project's root path from its name

Environment overrides are read at call time so tests can monkeypatch them.
"""
from __future__ import annotations

import os

DEFAULT_PROJECTS_ROOT = "/projects/"
PROJECTS_ROOT_ENV = "PROJKIT_PROJECTS_ROOT"
LOG_LEVEL_ENV = "PROJKIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def normalize_projects_root(root: str) -> str:
    """Return ``root`` with a trailing separator so names can be appended."""
    if not root.endswith(("/", os.sep)):
        root += "/"
    return root


def get_projects_root() -> str:
    """Return the configured projects parent directory, always ending in a separator."""
    return normalize_projects_root(os.getenv(PROJECTS_ROOT_ENV) or DEFAULT_PROJECTS_ROOT)


def resolve_project_path(name: str, root: str = DEFAULT_PROJECTS_ROOT) -> str:
    """Concatenate ``root`` and ``name``.

    No escaping is performed: a name containing separators or ``..`` resolves
    outside ``root``.
    """
    return root + name


def get_log_level() -> str:
    return (os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()


__all__ = [
    "DEFAULT_PROJECTS_ROOT",
    "PROJECTS_ROOT_ENV",
    "LOG_LEVEL_ENV",
    "normalize_projects_root",
    "get_projects_root",
    "resolve_project_path",
    "get_log_level",
]
