# src/file_reaper/tasks/task_scheduler.py

from __future__ import annotations

"""
Deletion scheduler.

One asyncio task ("waiter") per pending deletion:
- sleeps for the task's remaining delay (no polling),
- invokes the injected delete capability,
- records Completed or Failed into the shared OutcomeCollector.

Waiters are independent; a slow delete in one never delays another's deadline.
There is no cancellation API: waiters still running when the loop shuts down
are torn down with it.
"""

import asyncio
import logging
import os
from collections.abc import Iterable

from ..core.ports import DeleteFunc
from ..errors import DeletionError
from .outcomes import OutcomeCollector
from .reconciler import ScheduledDeletion
from .task_models import TaskOutcome, TaskStatus

logger = logging.getLogger(__name__)


async def remove_file(file_path: str) -> None:
    """Default delete capability: os.remove in a worker thread."""
    try:
        await asyncio.to_thread(os.remove, file_path)
    except OSError as exc:
        raise DeletionError(file_path, exc.strerror or str(exc)) from exc


async def run_waiter(
        item: ScheduledDeletion,
        outcomes: OutcomeCollector,
        delete: DeleteFunc = remove_file,
) -> TaskOutcome:
    logger.info("Waiting to delete file: %s", item.file_path)
    await asyncio.sleep(item.remaining.total_seconds())

    logger.info("Attempting to delete file: %s", item.file_path)
    try:
        await delete(item.file_path)
    except Exception as exc:
        logger.error("Failed to delete file '%s': %s", item.file_path, exc)
        status = TaskStatus.FAILED
    else:
        logger.info("'%s' has been deleted.", item.file_path)
        status = TaskStatus.COMPLETED

    outcome = TaskOutcome(index=item.index, file_path=item.file_path, status=status)
    outcomes.record(outcome)
    return outcome


def start_waiters(
        scheduled: Iterable[ScheduledDeletion],
        outcomes: OutcomeCollector,
        delete: DeleteFunc = remove_file,
) -> list[asyncio.Task[TaskOutcome]]:
    """
    Spawn one waiter per scheduled deletion on the running loop.

    The returned handles are only for observation (tests, diagnostics);
    callers are not required to await them.
    """
    waiters = [
        asyncio.create_task(run_waiter(item, outcomes, delete), name=f"waiter-{item.index}")
        for item in scheduled
    ]
    logger.debug("Started %d waiters", len(waiters))
    return waiters
