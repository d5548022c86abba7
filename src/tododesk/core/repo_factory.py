from __future__ import annotations

from tododesk.services.types import TodoStore

__all__ = ["get_store"]


def get_store() -> TodoStore:
    """Return a TodoStore over the shared client. Currently uses Supabase."""

    from tododesk.core.settings import get_settings
    from tododesk.services.store_client import get_store_client
    from tododesk.services.todo_store import SupabaseTodoStore

    return SupabaseTodoStore(get_store_client(), table=get_settings().todos_table)
