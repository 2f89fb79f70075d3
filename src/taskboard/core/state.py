# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_api import TaskForm
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: Any

    store: TaskStore
    # Kept so the composition root can close it on shutdown.
    service: Any = None

    form: TaskForm = field(default_factory=TaskForm)
