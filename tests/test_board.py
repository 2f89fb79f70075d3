# tests/test_board.py

from __future__ import annotations

from datetime import datetime

from taskboard.core.board import LOADING_MESSAGE, render_board
from taskboard.tasks.task_models import StoreState, StoreStatus, Task
from taskboard.tasks.task_store import apply_load_failed, apply_loaded

REF = datetime(2024, 5, 1, 12, 0)


def test_loading_and_failed_states_render_inline_message() -> None:
    assert render_board(StoreState()) == LOADING_MESSAGE
    failed = apply_load_failed(StoreState(), "Failed to load tasks")
    assert render_board(failed) == "Failed to load tasks"


def test_empty_board_shows_all_empty_states() -> None:
    text = render_board(apply_loaded(StoreState(), []), REF)
    assert "No tasks for today" in text
    assert "No upcoming tasks" in text
    assert "No completed tasks yet" in text


def test_sections_in_order_with_formatted_dates() -> None:
    tasks = [
        Task(id=2, text="Buy milk", date=datetime(2024, 5, 2, 0, 0)),
        Task(id=1, text="Pay rent", date=datetime(2024, 5, 1, 9, 0)),
        Task(id=3, text="Old thing", date=datetime(2024, 4, 1, 9, 0), completed=True),
    ]
    state = apply_loaded(StoreState(), tasks)
    assert state.status == StoreStatus.READY

    text = render_board(state, REF)
    today_at = text.index("Today:")
    upcoming_at = text.index("Upcoming:")
    completed_at = text.index("Completed:")

    assert today_at < text.index("Pay rent") < upcoming_at
    assert upcoming_at < text.index("Buy milk") < completed_at
    assert completed_at < text.index("[x] #3  Old thing")
    assert "1 May 2024, 9:00 am" in text
