"""Application bootstrap utilities for the TodoDesk desktop app."""

from __future__ import annotations

import logging
import os
import sys

from PyQt5.QtCore import QCoreApplication, Qt
from PyQt5.QtWidgets import QApplication

from tododesk.core.repo_factory import get_store
from tododesk.services.types import TodoStore
from tododesk.ui import theme
from tododesk.ui.main_window import TodoMainWindow
from utils.config import APP_NAME

log = logging.getLogger(__name__)

# Ensure HiDPI scaling is enabled before the QApplication is instantiated
os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")
os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")


class TodoDeskLauncher:
    """Create the Qt application, theme it, and show the main window."""

    def __init__(self, store: TodoStore | None = None) -> None:
        QCoreApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
        QCoreApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)
        QCoreApplication.setApplicationName(APP_NAME)

        self.app = QApplication.instance() or QApplication(sys.argv)
        self._apply_theme()
        self.window = TodoMainWindow(store if store is not None else get_store())

    # ------------------------------------------------------------------
    def _apply_theme(self) -> None:
        mode = theme.apply_theme_from_settings()
        log.debug("Applied %s theme", mode)
        if sys.platform == "darwin":
            self.app.setStyle("macintosh")

    # ------------------------------------------------------------------
    def run(self) -> int:
        self.window.show()
        return self.app.exec_()
