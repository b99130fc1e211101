# tasks/shutdown.py

from __future__ import annotations

import asyncio
import logging

from ..core.ports import TaskRepo
from .outcomes import OutcomeCollector
from .task_models import DeletionTask, TaskStatus

logger = logging.getLogger(__name__)


class ShutdownCoordinator:
    """
    Final flush of waiter results.

    wait() blocks until the stop event is set (no timeout). finish() drains the
    outcome collector into the in-memory list and saves it once. Outcomes that
    arrive after finish() are not persisted.
    """

    def __init__(self, store: TaskRepo, outcomes: OutcomeCollector) -> None:
        self._store = store
        self._outcomes = outcomes

    async def wait(self, stop: asyncio.Event) -> None:
        await stop.wait()
        logger.info("Shutdown signal received, flushing task state...")

    def merge(self, tasks: list[DeletionTask]) -> int:
        """Apply drained outcomes by index; returns how many were applied."""
        applied = 0
        for outcome in self._outcomes.drain():
            if not 0 <= outcome.index < len(tasks):
                logger.warning("Outcome for unknown task index=%s path=%s; skipped", outcome.index, outcome.file_path)
                continue

            task = tasks[outcome.index]
            if task.file_path != outcome.file_path:
                logger.warning(
                    "Outcome path mismatch index=%s expected=%s got=%s; skipped",
                    outcome.index,
                    task.file_path,
                    outcome.file_path,
                )
                continue

            if task.status is not TaskStatus.PENDING:
                logger.warning("Task %s is already %s; outcome %s skipped", outcome.index, task.status, outcome.status)
                continue

            task.mark(outcome.status)
            logger.debug("Task %s '%s' -> %s", outcome.index, task.file_path, outcome.status)
            applied += 1

        logger.info("Merged %d outcomes", applied)
        return applied

    def finish(self, tasks: list[DeletionTask]) -> None:
        self.merge(tasks)
        self._store.save(tasks)
        logger.info("Saved %d tasks", len(tasks))
