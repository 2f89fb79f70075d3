# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import replace
from datetime import date, time as dtime
from typing import Any

from ..core.ports import TaskService
from .datetime_combiner import combine
from .errors import RemoteFailure, ValidationError, friendly_error_message
from .task_models import MalformedTask, StoreState, StoreStatus, Task, TaskId

logger = logging.getLogger(__name__)


# ---- pure state transitions ----


def apply_loading(state: StoreState) -> StoreState:
    return replace(state, status=StoreStatus.LOADING, error=None)


def apply_loaded(state: StoreState, tasks: Iterable[Task]) -> StoreState:
    return StoreState(status=StoreStatus.READY, error=None, tasks=tuple(tasks))


def apply_load_failed(state: StoreState, message: str) -> StoreState:
    return StoreState(status=StoreStatus.FAILED, error=message, tasks=())


def apply_added(state: StoreState, task: Task) -> StoreState:
    return replace(state, tasks=(*state.tasks, task))


def apply_removed(state: StoreState, task_id: TaskId) -> StoreState:
    return replace(state, tasks=tuple(t for t in state.tasks if t.id != task_id))


def apply_replaced(state: StoreState, task_id: TaskId, task: Task) -> StoreState:
    return replace(state, tasks=tuple(task if t.id == task_id else t for t in state.tasks))


def normalize_task_list(raw: Any) -> list[Task]:
    """
    Turn a list response into Tasks.

    Anything that is not a list yields []; malformed entries are skipped.
    """
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning("Task list response is not a list (%s); using []", type(raw).__name__)
        return []

    out: list[Task] = []
    for item in raw:
        try:
            out.append(Task.from_json(item))
        except MalformedTask as e:
            logger.warning("Skipping malformed task entry: %s", e)
    return out


class TaskStore:
    """
    In-memory task collection synchronised with a remote TaskService.

    Every mutation is confirm-then-apply: the remote call goes first and the
    local snapshot changes only once it succeeded. A failed call leaves the
    snapshot as it was, so there is nothing to roll back.

    Overlapping calls are not ordered: whichever response arrives last wins.
    With sequence_mutations=True a remove/toggle response is dropped while a
    newer request for the same id is still pending, or once a newer one has
    been applied.
    """

    def __init__(self, service: TaskService, *, sequence_mutations: bool = False) -> None:
        self._service = service
        self._state = StoreState()
        self._sequence_mutations = sequence_mutations
        self._ticket_seq = 0
        self._in_flight: dict[TaskId, set[int]] = {}
        self._applied: dict[TaskId, int] = {}
        self._last_client_id = 0

    # ---- snapshot accessors ----

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def status(self) -> StoreStatus:
        return self._state.status

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._state.tasks

    def get(self, task_id: TaskId) -> Task | None:
        return self._state.find(task_id)

    # ---- helpers ----

    def _next_client_id(self) -> int:
        # Millisecond timestamp, bumped so two adds in the same ms never collide.
        now_ms = int(time.time() * 1000)
        self._last_client_id = max(now_ms, self._last_client_id + 1)
        return self._last_client_id

    def _issue_ticket(self, task_id: TaskId) -> int:
        self._ticket_seq += 1
        self._in_flight.setdefault(task_id, set()).add(self._ticket_seq)
        return self._ticket_seq

    def _release_ticket(self, task_id: TaskId, ticket: int) -> None:
        pending = self._in_flight.get(task_id)
        if pending is None:
            return
        pending.discard(ticket)
        if not pending:
            # Nothing older can still arrive for this id.
            del self._in_flight[task_id]
            self._applied.pop(task_id, None)

    def _mark_applied(self, task_id: TaskId, ticket: int) -> None:
        self._applied[task_id] = max(ticket, self._applied.get(task_id, 0))

    def _is_stale(self, task_id: TaskId, ticket: int) -> bool:
        """
        A response is stale when a newer request for the same id is still in
        flight, or a newer response was already applied. Newer requests that
        failed do not count.
        """
        if not self._sequence_mutations:
            return False
        if any(t > ticket for t in self._in_flight.get(task_id, ())):
            return True
        return self._applied.get(task_id, 0) > ticket

    @staticmethod
    def _as_failure(operation: str, exc: Exception) -> RemoteFailure:
        if isinstance(exc, RemoteFailure):
            return exc
        return RemoteFailure(operation, str(exc) or exc.__class__.__name__)

    # ---- operations ----

    async def load(self) -> StoreState:
        """
        Replace the collection with the service's list.

        Failures are not raised: they put the store in FAILED with an inline
        message and an empty collection.
        """
        self._state = apply_loading(self._state)
        try:
            raw = await self._service.list_tasks()
        except Exception as e:
            failure = self._as_failure("load", e)
            logger.error("Failed to fetch tasks: %s", failure)
            self._state = apply_load_failed(self._state, friendly_error_message(failure))
            return self._state

        tasks = normalize_task_list(raw)
        self._state = apply_loaded(self._state, tasks)
        logger.info("Loaded %d tasks", len(tasks))
        return self._state

    async def add(
        self,
        text: str,
        date_value: str | date | None,
        time_value: str | dtime | None = None,
    ) -> Task:
        clean_text = (text or "").strip()
        if not clean_text or not date_value:
            raise ValidationError("Please enter a task and select a date.")

        when = combine(date_value, time_value)
        candidate = Task(id=self._next_client_id(), text=clean_text, date=when, completed=False)

        try:
            created_raw = await self._service.create_task(candidate.to_json())
            created = Task.from_json(created_raw)
        except MalformedTask as e:
            failure = RemoteFailure("add", f"malformed response: {e}")
            logger.warning("Failed to add task: %s", failure)
            raise failure from e
        except Exception as e:
            failure = self._as_failure("add", e)
            logger.warning("Failed to add task: %s", failure)
            raise failure from e

        self._state = apply_added(self._state, created)
        logger.debug("Task added id=%s date=%s", created.id, created.date)
        return created

    async def remove(self, task_id: TaskId) -> bool:
        """Delete a task remotely, then locally. Returns False if the response was stale."""
        ticket = self._issue_ticket(task_id)
        try:
            try:
                await self._service.delete_task(task_id)
            except Exception as e:
                failure = self._as_failure("remove", e)
                logger.warning("Failed to delete task id=%s: %s", task_id, failure)
                raise failure from e

            if self._is_stale(task_id, ticket):
                logger.info("Dropping stale delete response id=%s", task_id)
                return False

            self._state = apply_removed(self._state, task_id)
            self._mark_applied(task_id, ticket)
        finally:
            self._release_ticket(task_id, ticket)

        logger.debug("Task removed id=%s", task_id)
        return True

    async def toggle_complete(self, task_id: TaskId) -> Task | None:
        """
        Flip `completed` on the server and store the returned record.

        Unknown ids are a no-op (None). A stale response (sequencing on) is
        also dropped and yields None.
        """
        task = self._state.find(task_id)
        if task is None:
            return None

        ticket = self._issue_ticket(task_id)
        try:
            try:
                updated_raw = await self._service.update_task(task_id, task.toggled().to_json())
                updated = Task.from_json(updated_raw)
            except MalformedTask as e:
                failure = RemoteFailure("toggle", f"malformed response: {e}")
                logger.warning("Failed to update task id=%s: %s", task_id, failure)
                raise failure from e
            except Exception as e:
                failure = self._as_failure("toggle", e)
                logger.warning("Failed to update task id=%s: %s", task_id, failure)
                raise failure from e

            if self._is_stale(task_id, ticket):
                logger.info("Dropping stale update response id=%s", task_id)
                return None

            self._state = apply_replaced(self._state, task_id, updated)
            self._mark_applied(task_id, ticket)
        finally:
            self._release_ticket(task_id, ticket)

        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        return updated
