# tasks/outcomes.py

from __future__ import annotations

import threading

from .task_models import TaskOutcome


class OutcomeCollector:
    """
    Shared sink for waiter results.

    Waiters append concurrently; the shutdown coordinator drains once.
    The lock is held only for a single append or drain, never across a delete.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[TaskOutcome] = []

    def record(self, outcome: TaskOutcome) -> None:
        with self._lock:
            self._items.append(outcome)

    def drain(self) -> list[TaskOutcome]:
        with self._lock:
            items, self._items = self._items, []
        return items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
