# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Top-level window hosting the todo panel."""

from __future__ import annotations

import logging

from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import QAction, QMainWindow, QMessageBox, QWidget

from tododesk.services.types import TodoStore
from tododesk.ui import theme
from tododesk.ui.jobs import JobRunner
from tododesk.ui.todo_controller import TodoController
from tododesk.ui.todo_view import TodoWidget
from utils.config import APP_NAME, APP_VERSION

log = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 4000


class TodoMainWindow(QMainWindow):
    """Main window; activates the controller the first time it is shown.

    View > Reload swaps in a fresh controller and panel, which is the only
    way back to the list after an error.
    """

    def __init__(
        self,
        store: TodoStore,
        *,
        runner: JobRunner | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"{APP_NAME} {APP_VERSION}")
        self.resize(560, 640)

        self._store = store
        self._runner = runner
        self._mount()
        self._build_menus()

    def _mount(self) -> None:
        """Build a fresh controller and panel and make them current."""
        self.controller = TodoController(self._store, runner=self._runner, parent=self)
        self.todo_widget = TodoWidget(self.controller, self)
        self.setCentralWidget(self.todo_widget)

        self.controller.warning_raised.connect(self._show_warning)
        self.controller.alert_raised.connect(self._show_alert)
        self.controller.loading_changed.connect(self._on_loading_changed)

    def reload(self) -> None:
        """Drop the current list, error and draft, then fetch the todos again."""
        previous = self.controller
        # Late completions of the old controller must not reach the new panel
        previous.blockSignals(True)
        self._mount()
        previous.deleteLater()
        self.controller.activate()
        log.info("Todo list reloaded")

    # ------------------------------------------------------------------
    def _build_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        view_menu = self.menuBar().addMenu("&View")
        self.reload_action = QAction("&Reload", self)
        self.reload_action.setShortcuts([QKeySequence.Refresh, QKeySequence("Ctrl+R")])
        self.reload_action.triggered.connect(self.reload)
        view_menu.addAction(self.reload_action)
        view_menu.addSeparator()

        self.dark_mode_action = QAction("&Dark Theme", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.setChecked(theme.current_mode() == "dark")
        self.dark_mode_action.toggled.connect(self._toggle_dark_mode)
        view_menu.addAction(self.dark_mode_action)

    def _toggle_dark_mode(self, enabled: bool) -> None:
        mode = theme.set_theme_mode("dark" if enabled else "light")
        self.todo_widget.table.viewport().update()
        log.info("Theme switched to %s", mode)

    # ------------------------------------------------------------------
    def showEvent(self, event) -> None:  # noqa: N802 - Qt override
        super().showEvent(event)
        if self.controller.activate():
            log.debug("Initial todo load requested")

    def _on_loading_changed(self, loading: bool) -> None:
        if loading:
            self.statusBar().showMessage("Loading todos…")
        else:
            self.statusBar().showMessage(
                f"{len(self.controller.tasks)} todo(s)", STATUS_TIMEOUT_MS
            )

    def _show_warning(self, message: str) -> None:
        QMessageBox.warning(self, APP_NAME, message)

    def _show_alert(self, message: str) -> None:
        QMessageBox.critical(self, APP_NAME, message)
