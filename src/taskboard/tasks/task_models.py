# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum
from typing import Any

from .datetime_combiner import parse_wire, to_wire

TaskId = str | int


class StoreStatus(StrEnum):
    """
    TaskStore lifecycle.

    loading -> ready | failed; any state -> loading again on reload.
    """

    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class MalformedTask(ValueError):
    """A JSON entry that cannot be turned into a Task."""


@dataclass(slots=True, frozen=True)
class Task:
    id: TaskId
    text: str
    date: datetime
    completed: bool = False

    def toggled(self) -> Task:
        return replace(self, completed=not self.completed)

    @classmethod
    def from_json(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise MalformedTask(f"expected an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        if task_id is None or isinstance(task_id, bool) or not isinstance(task_id, (str, int)):
            raise MalformedTask(f"bad id: {task_id!r}")

        try:
            when = parse_wire(raw.get("date") or "")
        except (TypeError, ValueError) as e:
            raise MalformedTask(f"bad date for id={task_id!r}: {raw.get('date')!r}") from e

        completed = raw.get("completed", False)
        if completed is None:
            completed = False
        if not isinstance(completed, bool):
            raise MalformedTask(f"bad completed flag for id={task_id!r}: {completed!r}")

        return cls(
            id=task_id,
            text=str(raw.get("text") or ""),
            date=when,
            completed=completed,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "date": to_wire(self.date),
            "completed": self.completed,
        }


@dataclass(slots=True, frozen=True)
class StoreState:
    """Immutable snapshot of the store: status, inline error message, tasks."""

    status: StoreStatus = StoreStatus.LOADING
    error: str | None = None
    tasks: tuple[Task, ...] = field(default_factory=tuple)

    def find(self, task_id: TaskId) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None
