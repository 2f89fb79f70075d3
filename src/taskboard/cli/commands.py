# src/taskboard/cli/commands.py

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Awaitable, Callable

from ..core.board import render_board
from ..core.state import AppState
from ..tasks.errors import TaskboardError, friendly_error_message
from ..tasks.task_api import resolve_task_id, submit_form

CommandHandler = Callable[[AppState, list[str]], "str | Awaitable[str]"]

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        result = handler(state, args)
        if inspect.isawaitable(result):
            result = await result
        return result

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _form_summary(state: AppState) -> str:
    form = state.form
    if form.is_empty():
        return "Form is empty."
    return (
        "Current form:\n"
        f"  text: {form.text or '-'}\n"
        f"  date: {form.date or '-'}\n"
        f"  time: {form.time or '-'}"
    )


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_board(state.store.state)


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.store
    base_url = getattr(state.settings, "api_base_url", "?")
    lines = [
        "Status:",
        f"  Store: {store.status.value}",
        f"  Tasks: {len(store.tasks)}",
        f"  API: {base_url}",
    ]
    if store.error:
        lines.append(f"  Error: {store.error}")
    return "\n".join(lines)


async def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add 2024-05-02 Buy milk
    /add 2024-05-02 18:30 Buy milk
    """
    if not args:
        return "Usage: /add <YYYY-MM-DD> [HH:MM] <text>"

    date_value = args[0]
    rest = args[1:]
    time_value = ""
    if rest and _TIME_RE.match(rest[0]):
        time_value = rest[0]
        rest = rest[1:]

    logger.debug("Add requested date=%s time=%s", date_value, time_value or "-")
    state.form.date = date_value
    state.form.time = time_value
    state.form.text = " ".join(rest)
    return await cmd_submit(state, [])


async def cmd_submit(state: AppState, args: list[str]) -> str:
    try:
        task = await submit_form(state.store, state.form)
    except TaskboardError as e:
        return friendly_error_message(e)
    return f"Added #{task.id}: {task.text}"


def cmd_form(state: AppState, args: list[str]) -> str:
    return _form_summary(state)


async def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <id>"
    task_id = resolve_task_id(state.store, args[0])
    if task_id is None:
        return f"No task with id {args[0]}."
    try:
        updated = await state.store.toggle_complete(task_id)
    except TaskboardError as e:
        return friendly_error_message(e)
    if updated is None:
        return f"Task #{task_id} was not updated."
    return f"Task #{updated.id} marked {'done' if updated.completed else 'not done'}."


async def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <id>"
    task_id = resolve_task_id(state.store, args[0])
    if task_id is None:
        return f"No task with id {args[0]}."
    try:
        removed = await state.store.remove(task_id)
    except TaskboardError as e:
        return friendly_error_message(e)
    if not removed:
        return f"Task #{task_id} was not deleted (a newer request is pending)."
    return f"Deleted #{task_id}."


async def cmd_reload(state: AppState, args: list[str]) -> str:
    await state.store.load()
    return render_board(state.store.state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks by Today / Upcoming / Completed.", aliases=["ls", "board"])
registry.register("add", cmd_add, help_text="Add a task: /add <YYYY-MM-DD> [HH:MM] <text>.")
registry.register("form", cmd_form, help_text="Show the pending add form.")
registry.register("submit", cmd_submit, help_text="Resubmit the add form after a failure.")
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["delete", "del"])
registry.register("reload", cmd_reload, help_text="Reload tasks from the server.")
registry.register("status", cmd_status, help_text="Show store status and API URL.")
