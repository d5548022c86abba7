"""Remote store services."""

from tododesk.services.types import StoreError, TodoStore

__all__ = ["StoreError", "TodoStore"]
