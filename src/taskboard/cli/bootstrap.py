# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the HTTP task service into a TaskStore and AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..remote.http_client import HttpTaskService
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, service=None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and service are injectable so tests can avoid env reads and the network.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    if service is None:
        service = HttpTaskService(
            settings.api_base_url,
            timeout_seconds=settings.api_timeout_seconds,
        )

    store = TaskStore(service, sequence_mutations=bool(settings.sequence_mutations))
    logger.debug(
        "State created api=%s sequence_mutations=%s",
        settings.api_base_url,
        settings.sequence_mutations,
    )
    return AppState(settings=settings, store=store, service=service)


async def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    close = getattr(state.service, "aclose", None)
    if close is None:
        return
    try:
        await close()
    except Exception:
        logger.debug("Task service close failed.", exc_info=True)
