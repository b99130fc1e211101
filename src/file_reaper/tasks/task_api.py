# src/file_reaper/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from ..core.ports import TaskRepo
from .task_models import DeletionTask, TaskStatus

logger = logging.getLogger(__name__)


def ingest_deletion(
    tasks: list[DeletionTask],
    store: TaskRepo,
    *,
    file_path: str,
    delay_minutes: int,
    now: datetime | None = None,
) -> DeletionTask:
    """
    Append a new Pending deletion and persist the whole list right away,
    so the request survives a crash before any waiter starts.
    """
    if not file_path or not file_path.strip():
        raise ValueError("file_path is required")
    if delay_minutes < 0:
        raise ValueError("delay_minutes must be >= 0")

    if now is None:
        now = datetime.now(UTC)

    try:
        delete_at = now + timedelta(minutes=delay_minutes)
    except OverflowError as exc:
        raise ValueError(f"delay_minutes too large: {delay_minutes}") from exc

    task = DeletionTask(
        file_path=file_path,
        delete_at=delete_at,
        created_at=now,
        status=TaskStatus.PENDING,
    )
    tasks.append(task)
    store.save(tasks)

    logger.info("Scheduled to delete '%s' in %d minutes.", file_path, delay_minutes)
    return task


def summarize_tasks(tasks: Sequence[DeletionTask]) -> dict[TaskStatus, int]:
    counts = {status: 0 for status in TaskStatus}
    for task in tasks:
        counts[task.status] += 1
    return counts


def log_task_summary(tasks: Sequence[DeletionTask]) -> None:
    counts = summarize_tasks(tasks)
    logger.info("Task Summary:")
    for status, n in counts.items():
        logger.info("%-10s %d", f"{status.value}:", n)
