# tests/test_task_models.py

from __future__ import annotations

import pytest

from file_reaper.errors import InvalidTransitionError
from file_reaper.tasks.task_models import DeletionTask, TaskStatus


def test_only_pending_is_non_terminal() -> None:
    assert not TaskStatus.PENDING.is_terminal
    assert all(s.is_terminal for s in TaskStatus if s is not TaskStatus.PENDING)


def test_mark_leaves_pending_exactly_once(now) -> None:
    task = DeletionTask("a.txt", now, now)
    task.mark(TaskStatus.COMPLETED)
    assert task.status is TaskStatus.COMPLETED

    with pytest.raises(InvalidTransitionError):
        task.mark(TaskStatus.FAILED)
    assert task.status is TaskStatus.COMPLETED


def test_mark_cannot_target_pending(now) -> None:
    task = DeletionTask("a.txt", now, now)
    with pytest.raises(InvalidTransitionError):
        task.mark(TaskStatus.PENDING)
