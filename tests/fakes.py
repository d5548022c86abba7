"""In-memory stand-ins for the remote store used across the tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from tododesk.core.models import Task
from tododesk.services.types import StoreError

T0 = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


def make_task(todo_id, text, *, done=False, offset=0):
    return Task(id=todo_id, task=text, is_complete=done, created_at=T0 + timedelta(minutes=offset))


class FakeStore:
    """TodoStore keeping rows in a list and recording every call."""

    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.calls = []
        self.failures = {}
        self._next_id = max((int(t.id) for t in self.rows), default=0) + 1

    def fail(self, op, message):
        """Make the next ``op`` call raise StoreError(message)."""
        self.failures[op] = message

    def _check(self, op):
        message = self.failures.pop(op, None)
        if message is not None:
            raise StoreError(message)

    def list_todos(self):
        self.calls.append(("list",))
        self._check("list")
        return list(self.rows)

    def insert_todo(self, text):
        self.calls.append(("insert", text))
        self._check("insert")
        task = make_task(self._next_id, text, offset=self._next_id)
        self._next_id += 1
        self.rows.append(task)
        return task

    def set_complete(self, todo_id, value):
        self.calls.append(("update", todo_id, value))
        self._check("update")
        self.rows = [t.with_complete(value) if t.id == todo_id else t for t in self.rows]

    def delete_todo(self, todo_id):
        self.calls.append(("delete", todo_id))
        self._check("delete")
        self.rows = [t for t in self.rows if t.id != todo_id]

    def count(self, op):
        return sum(1 for call in self.calls if call[0] == op)


class _Query:
    def __init__(self, client, table):
        self._client = client
        self.ops = [("table", table)]

    def _record(self, name, *args, **kwargs):
        self.ops.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._record("select", *args, **kwargs)

    def order(self, *args, **kwargs):
        return self._record("order", *args, **kwargs)

    def insert(self, *args, **kwargs):
        return self._record("insert", *args, **kwargs)

    def update(self, *args, **kwargs):
        return self._record("update", *args, **kwargs)

    def delete(self, *args, **kwargs):
        return self._record("delete", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._record("eq", *args, **kwargs)

    def execute(self):
        self._client.executed.append(self.ops)
        if self._client.error is not None:
            raise self._client.error
        return SimpleNamespace(data=self._client.data)


class FakeClient:
    """Mimics the fluent ``client.table(...)...execute()`` query chain."""

    def __init__(self, data=None, error=None):
        self.data = data if data is not None else []
        self.error = error
        self.executed = []

    def table(self, name):
        return _Query(self, name)
