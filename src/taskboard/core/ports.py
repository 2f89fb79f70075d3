# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on a Protocol instead of the HTTP client, so tests and
alternative transports can plug in without touching the store.
"""

from typing import Any, Protocol

TaskJSON = dict[str, Any]
# Wire shape: {"id": str|int, "text": str, "date": "YYYY-MM-DDTHH:MM", "completed": bool}.


class TaskService(Protocol):
    """
    Remote CRUD endpoint for tasks.

    Every method raises RemoteFailure when the call does not succeed.
    """

    async def list_tasks(self) -> Any:
        """Return the decoded body of GET /api/tasks (normally a list of TaskJSON)."""
        ...

    async def create_task(self, payload: TaskJSON) -> TaskJSON: ...

    async def update_task(self, task_id: str | int, payload: TaskJSON) -> TaskJSON: ...

    async def delete_task(self, task_id: str | int) -> None: ...
