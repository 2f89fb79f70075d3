# src/taskboard/tasks/task_api.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from .task_models import Task, TaskId
from .task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskForm:
    """The add-task input fields (text, date, optional time)."""

    text: str = ""
    date: str = ""
    time: str = ""

    def clear(self) -> None:
        self.text = ""
        self.date = ""
        self.time = ""

    def is_empty(self) -> bool:
        return not (self.text or self.date or self.time)


async def submit_form(store: TaskStore, form: TaskForm) -> Task:
    """
    Submit the form through store.add().

    The fields are cleared only when the task was stored; on any error they
    keep their values so the user can fix or resubmit them.
    """
    created = await store.add(form.text, form.date, form.time)
    form.clear()
    logger.info("Task created id=%s", created.id)
    return created


def resolve_task_id(store: TaskStore, raw: str) -> TaskId | None:
    """
    Map a user-typed id to the id of a stored task.

    Ids may be ints or strings on the wire, while typed input is always text.
    """
    needle = (raw or "").strip()
    if not needle:
        return None
    for t in store.tasks:
        if str(t.id) == needle:
            return t.id
    return None
