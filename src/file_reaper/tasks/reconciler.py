# tasks/reconciler.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from .task_models import DeletionTask, TaskStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ScheduledDeletion:
    """A pending task handed to the scheduler with its remaining wait."""

    index: int
    file_path: str
    remaining: timedelta


def reconcile(tasks: Sequence[DeletionTask], now: datetime | None = None) -> list[ScheduledDeletion]:
    """
    Classify loaded tasks against the current time.

    - Pending with delete_at <= now: marked Expired in place, nothing scheduled.
    - Pending with delete_at > now: returned as ScheduledDeletion.
    - Terminal tasks: untouched.

    Runs synchronously and must finish before any waiter starts.
    """
    if now is None:
        now = datetime.now(UTC)

    scheduled: list[ScheduledDeletion] = []
    for index, task in enumerate(tasks):
        if task.status is not TaskStatus.PENDING:
            continue

        remaining = task.delete_at - now
        logger.info("Duration until delete for '%s': %s", task.file_path, remaining)

        if remaining <= timedelta(0):
            task.mark(TaskStatus.EXPIRED)
            logger.info("Task for '%s' has expired and will not be processed.", task.file_path)
            continue

        scheduled.append(ScheduledDeletion(index=index, file_path=task.file_path, remaining=remaining))

    return scheduled
