# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Todo list panel: input row, status labels and the task table."""

from __future__ import annotations

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tododesk.ui.todo_controller import TodoController
from tododesk.ui.todo_table import TodoTableModel, TodoTableView

HEADER_TEXT = "My Todo App"
PLACEHOLDER_TEXT = "Type a new todo..."
ADD_BUTTON_TEXT = "Add Todo"
LOADING_TEXT = "Loading todos..."
EMPTY_TEXT = "No todos yet! Add one above."


class TodoWidget(QWidget):
    """Render controller state and forward user input back to it."""

    def __init__(self, controller: TodoController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller

        main = QVBoxLayout(self)
        main.setContentsMargins(20, 20, 20, 20)
        main.setSpacing(12)

        self.header_label = QLabel(HEADER_TEXT, self)
        self.header_label.setObjectName("TodoHeader")
        main.addWidget(self.header_label)

        add_row = QHBoxLayout()
        add_row.setSpacing(10)
        self.input = QLineEdit(self)
        self.input.setObjectName("TodoInput")
        self.input.setPlaceholderText(PLACEHOLDER_TEXT)
        self.input.setMinimumWidth(260)
        self.add_button = QPushButton(ADD_BUTTON_TEXT, self)
        self.add_button.setDefault(True)
        add_row.addWidget(self.input, 1)
        add_row.addWidget(self.add_button)
        main.addLayout(add_row)

        separator = QFrame(self)
        separator.setFrameShape(QFrame.HLine)
        separator.setFrameShadow(QFrame.Sunken)
        main.addWidget(separator)

        self.loading_label = QLabel(LOADING_TEXT, self)
        self.loading_label.setObjectName("TodoLoading")
        self.error_label = QLabel(self)
        self.error_label.setObjectName("TodoError")
        self.error_label.setWordWrap(True)
        self.error_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.empty_label = QLabel(EMPTY_TEXT, self)
        self.empty_label.setObjectName("TodoEmpty")

        self.model = TodoTableModel(self)
        self.table = TodoTableView(self)
        self.table.setModel(self.model)

        main.addWidget(self.loading_label)
        main.addWidget(self.error_label)
        main.addWidget(self.empty_label)
        main.addWidget(self.table, 1)
        main.addStretch(0)

        # user input -> controller
        self.input.textChanged.connect(controller.set_draft_text)
        self.input.returnPressed.connect(self._submit)
        self.add_button.clicked.connect(self._submit)
        self.model.toggle_requested.connect(controller.toggle_complete)
        self.model.delete_requested.connect(controller.delete)

        # controller -> view
        controller.tasks_changed.connect(self._refresh_tasks)
        controller.loading_changed.connect(lambda *_: self._refresh_visibility())
        controller.error_changed.connect(lambda *_: self._refresh_visibility())
        controller.draft_text_changed.connect(self._sync_draft)

        self._refresh_tasks()

    # ------------------------------------------------------------------
    @property
    def controller(self) -> TodoController:
        return self._controller

    def _submit(self) -> None:
        self._controller.add()

    def _sync_draft(self, text: str) -> None:
        if self.input.text() != text:
            self.input.setText(text)

    def _refresh_tasks(self) -> None:
        self.model.set_tasks(self._controller.tasks)
        self._refresh_visibility()

    def _refresh_visibility(self) -> None:
        controller = self._controller
        error = controller.error
        show_list = not controller.loading and not error
        has_rows = bool(controller.tasks)

        self.loading_label.setVisible(controller.loading)
        self.error_label.setVisible(bool(error))
        self.error_label.setText(f"Error: {error}" if error else "")
        self.empty_label.setVisible(show_list and not has_rows)
        self.table.setVisible(show_list and has_rows)
