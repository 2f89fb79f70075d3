# src/taskboard/core/board.py

"""
Text rendering of the task board.

While the store is loading or failed, the board is a single inline message.
Otherwise it shows the three buckets in a fixed order, each with an empty
state line when it has no tasks.
"""

from __future__ import annotations

from datetime import datetime

from ..tasks.categorizer import partition
from ..tasks.datetime_combiner import format_display
from ..tasks.task_models import StoreState, StoreStatus, Task

LOADING_MESSAGE = "Loading tasks..."

SECTIONS: tuple[tuple[str, str, str], ...] = (
    ("today", "Today", "No tasks for today 🎉"),
    ("upcoming", "Upcoming", "No upcoming tasks"),
    ("completed", "Completed", "No completed tasks yet"),
)


def render_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"  [{mark}] #{task.id}  {task.text}  ({format_display(task.date)})"


def render_board(state: StoreState, reference: datetime | None = None) -> str:
    if state.status == StoreStatus.LOADING:
        return LOADING_MESSAGE
    if state.status == StoreStatus.FAILED:
        return state.error or "Failed to load tasks"

    buckets = partition(state.tasks, reference)
    lines: list[str] = []
    for attr, title, empty in SECTIONS:
        items: list[Task] = getattr(buckets, attr)
        lines.append(f"{title}:")
        if not items:
            lines.append(f"  {empty}")
        else:
            lines.extend(render_task(t) for t in items)
        lines.append("")
    return "\n".join(lines).rstrip()
