"""Domain models and configuration for TodoDesk."""

from tododesk.core.models import Task, TaskId, sort_by_created, tasks_from_rows
from tododesk.core.settings import StoreSettings, get_settings

__all__ = [
    "Task",
    "TaskId",
    "sort_by_created",
    "tasks_from_rows",
    "StoreSettings",
    "get_settings",
]
