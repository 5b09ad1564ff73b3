from __future__ import annotations

class UserFacingError(Exception):
    """Base exception carrying user-presentable context."""

    def __init__(self, message: str, *, title: str, remediation: str | None = None) -> None:
        super().__init__(message)
        self.title = title
        self.remediation = remediation or ""


class ProjectOpenError(UserFacingError):
    pass


class ProjectNotFoundError(ProjectOpenError):
    """Raised when the storage cannot bind to the project's root."""

    def __init__(self, name: str, path: str) -> None:
        super().__init__(
            f"Project not found at {path}.",
            title="Project Not Found",
            remediation="Check the project name or create the project directory first.",
        )
        self.name = name
        self.path = path


__all__ = [
    "UserFacingError",
    "ProjectOpenError",
    "ProjectNotFoundError",
]
