# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Remote calls against the ``todos`` table."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError

from tododesk.core.models import Task, TaskId, tasks_from_rows
from tododesk.services.types import StoreError

log = logging.getLogger(__name__)

DEFAULT_TABLE = "todos"


def _execute(describe: str, build: Callable[[], Any]) -> Any:
    """Run a query builder and return ``response.data``.

    Client, transport and payload errors all come out as :class:`StoreError`.
    """

    try:
        response = build().execute()
    except StoreError:
        raise
    except APIError as exc:
        message = exc.message or str(exc)
        log.debug("%s rejected by server: %s (code=%s)", describe, message, exc.code)
        raise StoreError(message) from exc
    except httpx.HTTPError as exc:
        log.debug("%s transport failure: %s", describe, exc)
        raise StoreError(str(exc) or type(exc).__name__) from exc
    return response.data


class SupabaseTodoStore:
    """:class:`~tododesk.services.types.TodoStore` backed by a Supabase table."""

    def __init__(self, client: Any, table: str = DEFAULT_TABLE) -> None:
        self._client = client
        self._table = table

    def _query(self) -> Any:
        return self._client.table(self._table)

    # ------------------------------------------------------------------
    def list_todos(self) -> list[Task]:
        rows = _execute(
            "select",
            lambda: self._query().select("*").order("created_at", desc=False),
        )
        log.debug("Fetched %d todo rows", len(rows or []))
        try:
            return tasks_from_rows(rows or [])
        except ValidationError as exc:
            raise StoreError(f"Unexpected row shape in {self._table!r}: {exc}") from exc

    def insert_todo(self, text: str) -> Task:
        rows = _execute("insert", lambda: self._query().insert({"task": text}))
        if not rows:
            raise StoreError("Insert returned no rows")
        try:
            return Task.from_row(rows[0])
        except ValidationError as exc:
            raise StoreError(f"Unexpected row shape in {self._table!r}: {exc}") from exc

    def set_complete(self, todo_id: TaskId, value: bool) -> None:
        _execute(
            "update",
            lambda: self._query().update({"is_complete": value}).eq("id", todo_id),
        )

    def delete_todo(self, todo_id: TaskId) -> None:
        _execute("delete", lambda: self._query().delete().eq("id", todo_id))
