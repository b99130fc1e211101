# src/file_reaper/errors.py

"""
Error taxonomy.

Store-level errors abort the run; per-task deletion errors are contained
inside the waiter and recorded as a Failed status.
"""

from __future__ import annotations

from pathlib import Path


class ReaperError(Exception):
    """Base class for all file_reaper errors."""


class CorruptStateError(ReaperError):
    """The task document exists but cannot be decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Task document {self.path} is corrupt: {reason}")


class PersistenceError(ReaperError):
    """Reading or writing the task document failed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot persist task document {self.path}: {reason}")


class DeletionError(ReaperError):
    """The delete capability reported an error for one file."""

    def __init__(self, file_path: str, reason: str) -> None:
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Failed to delete {file_path!r}: {reason}")


class InvalidTransitionError(ReaperError):
    """A task status change that would break the one-way lifecycle."""
