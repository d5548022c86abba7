# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

from typing import cast

from PyQt5.QtCore import QSettings
from PyQt5.QtGui import QColor, QPalette
from PyQt5.QtWidgets import QApplication

from utils.config import APP_NAME, ORGANIZATION

THEME_SETTINGS_KEY = "appearance/themeMode"

# -----------------------------------------------------------------------------
# Presets
# -----------------------------------------------------------------------------

LIGHT_THEME = {
    "window_bg": "#F3F4F6",
    "table_bg": "#FFFFFF",
    "alternate_bg": "#F9FAFB",
    "text": "#111827",
    "text_muted": "#6B7280",
    "button_bg": "#F3F4F6",
    "delete_bg": "#D3D3D3",
    "delete_text": "#000000",
    "grid_color": "#E5E7EB",
    "selection_bg": "#3B82F6",
    "highlighted_text": "#FFFFFF",
    "error_text": "#DC2626",
}

DARK_THEME = {
    "window_bg": "#1F2937",
    "table_bg": "#111827",
    "alternate_bg": "#1A2230",
    "text": "#F9FAFB",
    "text_muted": "#9CA3AF",
    "button_bg": "#374151",
    "delete_bg": "#4B5563",
    "delete_text": "#F9FAFB",
    "grid_color": "#374151",
    "selection_bg": "#2563EB",
    "highlighted_text": "#FFFFFF",
    "error_text": "#F87171",
}

CURRENT_THEME = dict(LIGHT_THEME)

FONTS = {
    "family": "Arial",
    "header_size": 20,
}


# -----------------------------------------------------------------------------
# Qt Palette & Stylesheet Application
# -----------------------------------------------------------------------------


def apply_qt_palette(theme: dict):
    """Copy theme colors into the application palette."""
    app = QApplication.instance()
    if app is None:
        return

    palette = QPalette()
    window_bg = QColor(theme["window_bg"])
    text = QColor(theme["text"])
    grid = QColor(theme["grid_color"])

    for group in [QPalette.Active, QPalette.Inactive, QPalette.Disabled]:
        palette.setColor(group, QPalette.Window, window_bg)
        palette.setColor(group, QPalette.WindowText, text)
        palette.setColor(group, QPalette.Base, QColor(theme["table_bg"]))
        palette.setColor(group, QPalette.AlternateBase, QColor(theme["alternate_bg"]))
        palette.setColor(group, QPalette.Text, text)
        palette.setColor(group, QPalette.Button, QColor(theme["button_bg"]))
        palette.setColor(group, QPalette.ButtonText, text)
        palette.setColor(group, QPalette.Highlight, QColor(theme["selection_bg"]))
        palette.setColor(group, QPalette.HighlightedText, QColor(theme["highlighted_text"]))
        palette.setColor(group, QPalette.Mid, grid)
        palette.setColor(group, QPalette.Dark, grid.darker(120))

    app.setPalette(palette)


def build_stylesheet(theme: dict) -> str:
    """Structural styles; colors come from the palette except where named."""
    return f"""
QWidget {{
    font-family: {FONTS["family"]};
}}
QPushButton {{
    border-radius: 6px;
    padding: 6px 12px;
}}
QLabel#TodoHeader {{
    font-size: {FONTS["header_size"]}pt;
    font-weight: bold;
}}
QLabel#TodoError {{
    color: {theme["error_text"]};
}}
QLabel#TodoEmpty, QLabel#TodoLoading {{
    color: {theme["text_muted"]};
}}
QHeaderView::section {{
    font-weight: bold;
}}
"""


def set_theme_mode(mode: str, *, persist: bool = True) -> str:
    """
    Apply theme mode: light or dark.

    Args:
        mode: "light" or "dark". Anything else falls back to "light".
        persist: Whether to persist the mode to QSettings.

    Returns:
        The mode that was set.
    """
    requested = (mode or "light").lower()
    if requested not in {"light", "dark"}:
        requested = "light"

    if persist:
        QSettings(ORGANIZATION, APP_NAME).setValue(THEME_SETTINGS_KEY, requested)

    # Update in place so imported references stay valid
    CURRENT_THEME.clear()
    CURRENT_THEME.update(DARK_THEME if requested == "dark" else LIGHT_THEME)

    apply_qt_palette(CURRENT_THEME)
    app = QApplication.instance()
    if app is not None:
        cast(QApplication, app).setStyleSheet(build_stylesheet(CURRENT_THEME))

    return requested


def current_mode() -> str:
    return "dark" if CURRENT_THEME.get("window_bg") == DARK_THEME["window_bg"] else "light"


def apply_theme_from_settings() -> str:
    """Apply the mode stored under ``appearance/themeMode`` (default light)."""
    mode = QSettings(ORGANIZATION, APP_NAME).value(THEME_SETTINGS_KEY, "light", type=str)
    return set_theme_mode(mode, persist=False)
