# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Controller holding the todo list state and mirroring remote results."""

from __future__ import annotations

import logging

from PyQt5.QtCore import QObject, pyqtSignal

from tododesk.app import flags
from tododesk.core.models import Task, TaskId, sort_by_created
from tododesk.services.types import TodoStore
from tododesk.ui.jobs import JobRunner, ThreadPoolRunner

log = logging.getLogger(__name__)

EMPTY_TASK_WARNING = "Todo task cannot be empty!"


class TodoController(QObject):
    """Own the in-memory task list and the loading/error/draft flags.

    Each mutation is sent to the store first; the local list changes only
    once the store has confirmed it. Nothing serialises concurrent
    mutations: completions patch ``tasks`` in whatever order they arrive.
    """

    tasks_changed = pyqtSignal()
    loading_changed = pyqtSignal(bool)
    error_changed = pyqtSignal(object)  # str | None
    draft_text_changed = pyqtSignal(str)
    warning_raised = pyqtSignal(str)  # input rejected, no remote call made
    alert_raised = pyqtSignal(str)  # mutation failed, show a blocking dialog

    def __init__(
        self,
        store: TodoStore,
        runner: JobRunner | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._runner = runner if runner is not None else ThreadPoolRunner(parent=self)

        self._tasks: list[Task] = []
        self._loading = False
        self._error: str | None = None
        self._draft_text = ""
        self._activated = False

    # ------------------------------------------------------------------
    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def draft_text(self) -> str:
        return self._draft_text

    def find(self, todo_id: TaskId) -> Task | None:
        for task in self._tasks:
            if task.id == todo_id:
                return task
        return None

    # ------------------------------------------------------------------
    def _set_tasks(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        self.tasks_changed.emit()

    def _set_loading(self, value: bool) -> None:
        if value != self._loading:
            self._loading = value
            self.loading_changed.emit(value)

    def _set_error(self, message: str | None) -> None:
        self._error = message
        self.error_changed.emit(message)

    def set_draft_text(self, text: str) -> None:
        if text != self._draft_text:
            self._draft_text = text
            self.draft_text_changed.emit(text)

    # ---- initial load ----------------------------------------------------
    def activate(self) -> bool:
        """Start the initial load; only the first call does anything."""

        if self._activated:
            return False
        self._activated = True
        self._load()
        return True

    def _load(self) -> None:
        self._set_loading(True)
        self._set_error(None)
        self._runner.submit(self._store.list_todos, self._on_loaded, self._on_load_failed)

    def _on_loaded(self, rows: list[Task]) -> None:
        log.info("Got %d todos", len(rows))
        self._set_tasks(list(rows))
        self._set_loading(False)

    def _on_load_failed(self, message: str) -> None:
        log.error("Error fetching todos: %s", message)
        self._set_error(message)
        self._set_loading(False)

    # ---- mutations -----------------------------------------------------
    def add(self, text: str | None = None) -> bool:
        """Insert ``text`` (or the current draft). Returns False if rejected."""

        if text is None:
            text = self._draft_text
        if not text.strip():
            self.warning_raised.emit(EMPTY_TASK_WARNING)
            return False
        self._runner.submit(
            lambda: self._store.insert_todo(text),
            self._on_added,
            lambda message: self._on_mutation_failed("adding", "add", message),
        )
        return True

    def _on_added(self, task: Task) -> None:
        tasks = [*self._tasks, task]
        if flags.is_enabled(flags.RESORT_ON_INSERT):
            tasks = sort_by_created(tasks)
        log.debug("Added todo id=%s", task.id)
        self._set_tasks(tasks)
        self.set_draft_text("")

    def toggle_complete(self, todo_id: TaskId, current_value: bool) -> None:
        new_value = not current_value
        self._runner.submit(
            lambda: self._store.set_complete(todo_id, new_value),
            lambda _result: self._on_toggled(todo_id, new_value),
            lambda message: self._on_mutation_failed("toggling", "update", message),
        )

    def _on_toggled(self, todo_id: TaskId, value: bool) -> None:
        self._set_tasks(
            [task.with_complete(value) if task.id == todo_id else task for task in self._tasks]
        )

    def delete(self, todo_id: TaskId) -> None:
        self._runner.submit(
            lambda: self._store.delete_todo(todo_id),
            lambda _result: self._on_deleted(todo_id),
            lambda message: self._on_mutation_failed("deleting", "delete", message),
        )

    def _on_deleted(self, todo_id: TaskId) -> None:
        self._set_tasks([task for task in self._tasks if task.id != todo_id])

    def _on_mutation_failed(self, gerund: str, verb: str, message: str) -> None:
        log.error("Error %s todo: %s", gerund, message)
        self._set_error(message)
        self.alert_raised.emit(f"Failed to {verb} todo: {message}")
