# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from ..errors import InvalidTransitionError


class TaskStatus(StrEnum):
    """
    Deletion task lifecycle status.

    Pending is the only non-terminal value. A task leaves Pending exactly once.
    Cancelled has no producer yet; it is kept so documents carrying it still load.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"
    EXPIRED = "Expired"
    CANCELLED = "Cancelled"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        return self is not TaskStatus.PENDING


def format_ts(dt: datetime) -> str:
    return dt.astimezone(UTC).isoformat()


def parse_ts(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp with an explicit offset, normalised to UTC."""
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        raise ValueError(f"timestamp without timezone: {raw!r}")
    return dt.astimezone(UTC)


@dataclass(slots=True)
class DeletionTask:
    file_path: str
    delete_at: datetime
    created_at: datetime
    status: TaskStatus = TaskStatus.PENDING

    def mark(self, status: TaskStatus) -> None:
        if self.status.is_terminal:
            raise InvalidTransitionError(
                f"{self.file_path!r} is already {self.status}; cannot become {status}"
            )
        if not status.is_terminal:
            raise InvalidTransitionError(f"{self.file_path!r} cannot move back to {status}")
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "delete_at": format_ts(self.delete_at),
            "created_at": format_ts(self.created_at),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> DeletionTask:
        """Strict decoder: raises KeyError/ValueError/TypeError on bad input."""
        file_path = raw["file_path"]
        if not isinstance(file_path, str):
            raise TypeError("file_path must be a string")
        return cls(
            file_path=file_path,
            delete_at=parse_ts(raw["delete_at"]),
            created_at=parse_ts(raw["created_at"]),
            status=TaskStatus(raw["status"]),
        )


@dataclass(slots=True, frozen=True)
class TaskOutcome:
    """A waiter's observed result, correlated to the task by index and path."""

    index: int
    file_path: str
    status: TaskStatus
