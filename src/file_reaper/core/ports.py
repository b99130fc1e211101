# src/file_reaper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The scheduler and shutdown code depend on Protocols instead of concrete
implementations, so the file store and the filesystem can be swapped in tests.
"""

from collections.abc import Sequence
from typing import Any, Awaitable, Protocol


class TaskRepo(Protocol):
    """Whole-document task storage."""

    def load(self) -> list[Any]: ...
    def save(self, tasks: Sequence[Any]) -> None: ...


class DeleteFunc(Protocol):
    """
    Delete capability: remove one path.

    Raising any exception means the deletion failed; the caller does not
    inspect the error further.
    """

    def __call__(self, file_path: str) -> Awaitable[None]: ...
