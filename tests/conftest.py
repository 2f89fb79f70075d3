# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.cli.bootstrap import create_initial_state
from taskboard.core.state import AppState

from .fakes import PAY_RENT, FakeTaskService


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and .env files.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        api_base_url="http://tasks.test",
        api_timeout_seconds=None,
        sequence_mutations=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def service() -> FakeTaskService:
    return FakeTaskService([PAY_RENT])


@pytest.fixture()
def state(settings: SimpleNamespace, service: FakeTaskService) -> AppState:
    """AppState wired to the in-memory service (nothing loaded yet)."""
    return create_initial_state(settings=settings, service=service)
