"""Service interfaces and error types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from tododesk.core.models import Task, TaskId

__all__ = ["StoreError", "TodoStore"]


class StoreError(Exception):
    """A remote call failed; ``message`` is safe to show to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@runtime_checkable
class TodoStore(Protocol):
    """The four remote operations the todo list needs.

    Implementations raise :class:`StoreError` on any failure.
    """

    def list_todos(self) -> Sequence[Task]: ...

    def insert_todo(self, text: str) -> Task: ...

    def set_complete(self, todo_id: TaskId, value: bool) -> None: ...

    def delete_todo(self, todo_id: TaskId) -> None: ...
