# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Rotating file logs for the desktop app."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER = "tododesk"
MAIN_LOG = "tododesk.log"
ERROR_LOG = "errors.log"

_MB = 1024 * 1024
_DETAILED = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
_SIMPLE = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

# Loggers that report every HTTP request at INFO
_CHATTY = ("httpx", "httpcore", "hpack")


def _rotating(path: Path, level: int, max_mb: int, backups: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=max_mb * _MB, backupCount=backups, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(_DETAILED)
    return handler


def setup_production_logging(
    app_name: str = "TodoDesk", console_level: int = logging.INFO
) -> Path:
    """
    Route package logs to a rotating file and the console.

    ``tododesk.log`` receives DEBUG+ records from the ``tododesk`` package
    (10 MB x 5). ``errors.log`` receives ERROR+ records from any logger
    (5 MB x 3). Calling this again replaces the handlers instead of adding
    more.

    Returns:
        Path to the log directory
    """
    log_dir = _get_log_directory(app_name)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers.clear()
    root_logger.addHandler(_rotating(log_dir / ERROR_LOG, logging.ERROR, 5, 3))

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(logging.DEBUG)
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(_rotating(log_dir / MAIN_LOG, logging.DEBUG, 10, 5))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(_SIMPLE)
    pkg_logger.addHandler(console_handler)

    for name in _CHATTY:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "%s logging to %s (Python %s on %s)",
        app_name,
        log_dir,
        sys.version.split()[0],
        sys.platform,
    )
    return log_dir


def _get_log_directory(app_name: str) -> Path:
    """
    Platform log directory.

    - Windows: %LOCALAPPDATA%\\AppName\\logs
    - macOS: ~/Library/Logs/AppName
    - Linux: $XDG_DATA_HOME/AppName/logs (default ~/.local/share)
    """
    home = Path.home()
    if sys.platform == "win32":
        return Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local")) / app_name / "logs"
    if sys.platform == "darwin":
        return home / "Library" / "Logs" / app_name
    return Path(os.environ.get("XDG_DATA_HOME", home / ".local" / "share")) / app_name / "logs"
