from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

TaskId = int | str


class Task(BaseModel):
    """One row of the ``todos`` table."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: TaskId
    task: str
    is_complete: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Task:
        return cls.model_validate(row)

    def with_complete(self, value: bool) -> Task:
        return self.model_copy(update={"is_complete": value})


def tasks_from_rows(rows: Iterable[dict[str, Any]]) -> list[Task]:
    """Validate raw rows, keeping the order they were returned in."""
    return [Task.from_row(row) for row in rows]


def sort_by_created(tasks: Iterable[Task]) -> list[Task]:
    """Stable sort by ``created_at``; records without a timestamp go last."""

    def _key(task: Task) -> tuple[bool, float]:
        if task.created_at is None:
            return (True, 0.0)
        return (False, task.created_at.timestamp())

    return sorted(tasks, key=_key)
