# tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ..errors import CorruptStateError, PersistenceError
from .task_models import DeletionTask

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole task list is one document (a JSON array). Nothing is ever removed
    from it; finished tasks stay as history.

    Writes go to a sibling temp file which is then renamed over the document,
    so a crash mid-save leaves either the old or the new document, never half of one.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[DeletionTask]:
        if not self._path.exists():
            logger.debug("No task document at %s; starting empty", self._path)
            return []

        try:
            text = self._path.read_text("utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptStateError(self._path, f"not UTF-8 ({exc})") from exc
        except OSError as exc:
            raise PersistenceError(self._path, str(exc)) from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CorruptStateError(self._path, f"invalid JSON ({exc})") from exc

        if not isinstance(data, list):
            raise CorruptStateError(self._path, "top-level value is not a list")

        tasks: list[DeletionTask] = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise CorruptStateError(self._path, f"entry {i} is not an object")
            try:
                tasks.append(DeletionTask.from_dict(item))
            except KeyError as exc:
                raise CorruptStateError(self._path, f"entry {i} is missing {exc}") from exc
            except (TypeError, ValueError) as exc:
                raise CorruptStateError(self._path, f"entry {i}: {exc}") from exc

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[DeletionTask]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, self._path)
        except OSError as exc:
            raise PersistenceError(self._path, str(exc)) from exc
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
