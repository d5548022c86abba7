#!/usr/bin/env python3
"""Convenience launcher for local TodoDesk development workflows."""

from __future__ import annotations

import argparse
import logging
import os

from PyQt5.QtWidgets import QApplication

from tododesk.app import reload as reload_flags
from tododesk.app.flags import ENV_VAR, all_enabled
from tododesk.core import settings as store_settings
from tododesk.core.repo_factory import get_store
from tododesk.ui import theme
from tododesk.ui.main_window import TodoMainWindow


def _apply_feature_overrides(raw: str | None) -> None:
    if raw is None:
        return
    os.environ[ENV_VAR] = raw
    reload_flags()


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the TodoDesk UI locally.")
    parser.add_argument(
        "--features",
        "-f",
        metavar="FLAGS",
        help="Comma-separated list of feature flags (TODODESK_FEATURES syntax).",
    )
    parser.add_argument(
        "--table",
        metavar="NAME",
        help="Use another table than 'todos' (e.g. a scratch copy).",
    )
    parser.add_argument(
        "--dark",
        action="store_true",
        help="Start in dark theme without persisting the choice.",
    )
    parser.add_argument(
        "--offscreen",
        action="store_true",
        help="Launch with QT_QPA_PLATFORM=offscreen (useful for CI / screenshots).",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG, format="%(levelname)-8s | %(name)s | %(message)s")

    if args.offscreen:
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    if args.table:
        os.environ["TODODESK_TABLE"] = args.table
        store_settings.reload()

    _apply_feature_overrides(args.features)

    app = QApplication.instance() or QApplication([])
    theme.set_theme_mode("dark" if args.dark else "light", persist=False)
    window = TodoMainWindow(get_store())
    window.show()

    active_flags = ", ".join(sorted(k for k, v in all_enabled().items() if v)) or "none"
    window.statusBar().showMessage(f"Active flags: {active_flags}", 4000)

    return app.exec_()


if __name__ == "__main__":
    raise SystemExit(main())
