# src/taskboard/tasks/errors.py

from __future__ import annotations

# User-facing alert text per failing operation.
_FRIENDLY: dict[str, str] = {
    "load": "Failed to load tasks",
    "add": "Could not add task. Try again.",
    "remove": "Could not delete task. Try again.",
    "toggle": "Could not update task. Try again.",
}


class TaskboardError(Exception):
    """Base class for every error raised by the task subsystem."""


class ValidationError(TaskboardError):
    """Input rejected before any network call (empty text, missing date)."""


class RemoteFailure(TaskboardError):
    """
    A CRUD call against the task service did not succeed.

    Covers non-2xx responses, transport errors and response bodies that
    are not a task object. Local state is never touched when this is raised.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is not None:
            return f"{self.operation}: {base} (HTTP {self.status_code})"
        return f"{self.operation}: {base}"


def friendly_error_message(err: Exception) -> str:
    if isinstance(err, ValidationError):
        return str(err).strip() or "Invalid input."
    if isinstance(err, RemoteFailure):
        return _FRIENDLY.get(err.operation, "Something went wrong. Try again.")
    return str(err).strip() or "Unexpected error."
