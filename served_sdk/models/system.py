"""Session registration and API health models."""

from datetime import datetime

from served_sdk.models.common import ServedModel


class ConflictWarning(ServedModel):
    description: str | None = None
    file_path: str | None = None


class SessionInfo(ServedModel):
    """Result of registering a client session with the coordination service."""

    session_id: str | None = None
    registered_at: datetime | None = None
    conflict_warnings: list[ConflictWarning] | None = None


class SessionRegistration(ServedModel):
    hostname: str
    working_directory: str
    source: str
    version: str
    task_id: int | None = None
    task_name: str | None = None


class ApiHealthInfo(ServedModel):
    status: str | None = None
    version: str | None = None
    git_commit: str | None = None
    build_date: str | None = None
    environment: str | None = None
    uptime: str | None = None
