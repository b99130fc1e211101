# tests/conftest.py

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from file_reaper.core.state import AppState
from file_reaper.tasks.outcomes import OutcomeCollector
from file_reaper.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="file-reaper-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        tasks_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, outcomes=OutcomeCollector())


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)
