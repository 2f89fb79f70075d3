# src/taskboard/tasks/categorizer.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from .datetime_combiner import same_day, to_local_naive
from .task_models import Task


@dataclass(slots=True)
class Buckets:
    today: list[Task] = field(default_factory=list)
    upcoming: list[Task] = field(default_factory=list)
    completed: list[Task] = field(default_factory=list)


def partition(tasks: Iterable[Task], reference: datetime | None = None) -> Buckets:
    """
    Split tasks into today / upcoming / completed, keeping input order.

    Rules, first match wins:
    - completed tasks go to `completed` whatever their date;
    - tasks on the reference's local calendar day go to `today`;
    - everything else goes to `upcoming`, including overdue tasks from past days.
    """
    ref = to_local_naive(reference) if reference is not None else datetime.now()
    out = Buckets()
    for task in tasks:
        if task.completed:
            out.completed.append(task)
        elif same_day(task.date, ref):
            out.today.append(task)
        else:
            out.upcoming.append(task)
    return out
