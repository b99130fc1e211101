# src/file_reaper/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.outcomes import OutcomeCollector
from ..tasks.task_models import DeletionTask
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskStore
    outcomes: OutcomeCollector = field(default_factory=OutcomeCollector)

    # In-memory task list for this run; flushed back to task_store on shutdown.
    tasks: list[DeletionTask] = field(default_factory=list)
