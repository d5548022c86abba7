# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for the TodoDesk application."""

from importlib import import_module

from tododesk.core.models import Task, TaskId
from tododesk.core.repo_factory import get_store
from tododesk.services.store_client import create_store_client, get_store_client
from tododesk.services.todo_store import SupabaseTodoStore
from tododesk.services.types import StoreError, TodoStore

_UI_EXPORTS = {
    "TodoController": ("tododesk.ui.todo_controller", "TodoController"),
    "TodoMainWindow": ("tododesk.ui.main_window", "TodoMainWindow"),
    "TodoWidget": ("tododesk.ui.todo_view", "TodoWidget"),
}


def __getattr__(name: str):
    if name in _UI_EXPORTS:
        module_name, attr = _UI_EXPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'tododesk' has no attribute {name!r}")


__all__ = [
    "Task",
    "TaskId",
    "StoreError",
    "TodoStore",
    "SupabaseTodoStore",
    "create_store_client",
    "get_store_client",
    "get_store",
    "TodoController",
    "TodoMainWindow",
    "TodoWidget",
]
