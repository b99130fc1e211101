# tests/test_task_scheduler.py

from __future__ import annotations

import asyncio
import contextlib
from datetime import timedelta
from pathlib import Path

import pytest

from file_reaper.errors import DeletionError
from file_reaper.tasks.outcomes import OutcomeCollector
from file_reaper.tasks.reconciler import ScheduledDeletion
from file_reaper.tasks.task_models import TaskOutcome, TaskStatus
from file_reaper.tasks.task_scheduler import remove_file, start_waiters

from .fakes import FakeDeleter


def _item(index: int, path: str, seconds: float) -> ScheduledDeletion:
    return ScheduledDeletion(index=index, file_path=path, remaining=timedelta(seconds=seconds))


@pytest.mark.asyncio
async def test_two_due_tasks_both_complete() -> None:
    outcomes = OutcomeCollector()
    deleter = FakeDeleter()

    waiters = start_waiters([_item(0, "a", 0.02), _item(1, "b", 0.02)], outcomes, deleter)
    await asyncio.gather(*waiters)

    got = sorted(outcomes.drain(), key=lambda o: o.index)
    assert got == [
        TaskOutcome(0, "a", TaskStatus.COMPLETED),
        TaskOutcome(1, "b", TaskStatus.COMPLETED),
    ]
    assert sorted(deleter.calls) == ["a", "b"]


@pytest.mark.asyncio
async def test_failed_delete_is_contained_to_its_task() -> None:
    outcomes = OutcomeCollector()
    deleter = FakeDeleter(fail={"missing"})

    waiters = start_waiters([_item(0, "missing", 0.01), _item(1, "ok", 0.01)], outcomes, deleter)
    results = await asyncio.gather(*waiters)

    assert {o.file_path: o.status for o in results} == {
        "missing": TaskStatus.FAILED,
        "ok": TaskStatus.COMPLETED,
    }
    assert len(outcomes) == 2


@pytest.mark.asyncio
async def test_no_delete_before_remaining_elapses() -> None:
    outcomes = OutcomeCollector()
    deleter = FakeDeleter()

    (waiter,) = start_waiters([_item(0, "later", 0.3)], outcomes, deleter)
    await asyncio.sleep(0.05)

    assert deleter.calls == []
    assert len(outcomes) == 0

    await waiter
    assert deleter.calls == ["later"]


@pytest.mark.asyncio
async def test_slow_delete_does_not_hold_back_other_waiters() -> None:
    outcomes = OutcomeCollector()
    deleter = FakeDeleter(delays={"slow": 1.0})

    slow, fast = start_waiters([_item(0, "slow", 0.0), _item(1, "fast", 0.02)], outcomes, deleter)
    await asyncio.wait_for(fast, timeout=0.5)

    assert [o.file_path for o in outcomes.drain()] == ["fast"]
    assert not slow.done()
    slow.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await slow


@pytest.mark.asyncio
async def test_remove_file_deletes_real_file(tmp_path: Path) -> None:
    target = tmp_path / "victim.txt"
    target.write_text("bye", "utf-8")

    await remove_file(str(target))
    assert not target.exists()


@pytest.mark.asyncio
async def test_remove_file_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DeletionError):
        await remove_file(str(tmp_path / "absent.txt"))
