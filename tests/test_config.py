# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskboard.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKBOARD_APP_NAME",
        "TASKBOARD_API_BASE_URL",
        "TASKBOARD_API_TIMEOUT_SECONDS",
        "TASKBOARD_SEQUENCE_MUTATIONS",
        "TASKBOARD_DATA_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "taskboard"
    assert s.api_base_url == "http://localhost:5000"
    assert s.api_timeout_seconds is None
    assert s.sequence_mutations is False
    assert s.data_dir == Path(".local/taskboard")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOARD_API_BASE_URL", "https://tasks.example.com")
    monkeypatch.setenv("TASKBOARD_API_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("TASKBOARD_SEQUENCE_MUTATIONS", "yes")
    monkeypatch.setenv("TASKBOARD_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.api_base_url == "https://tasks.example.com"
    assert s.api_timeout_seconds == 2.5
    assert s.sequence_mutations is True
    assert s.data_dir == tmp_path


def test_bad_timeout_falls_back_to_no_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOARD_API_TIMEOUT_SECONDS", "soon")
    assert Settings.from_env().api_timeout_seconds is None
