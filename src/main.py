# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Entry point for launching the TodoDesk desktop application."""

from __future__ import annotations

import logging
import sys

from tododesk.app.launcher import TodoDeskLauncher
from tododesk.core.logging_config import setup_production_logging
from utils.config import APP_NAME, APP_VERSION

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Bootstrap the Qt application and block until it exits."""
    argv = list(sys.argv if argv is None else argv)

    try:
        setup_production_logging(app_name=APP_NAME, console_level=logging.INFO)
        log.info(f"Starting {APP_NAME} {APP_VERSION}")
    except Exception as e:
        # Fall back to basic logging if the log directory is unusable
        logging.basicConfig(level=logging.INFO)
        log.error(f"Failed to setup production logging: {e}", exc_info=True)

    try:
        launcher = TodoDeskLauncher()
        status = launcher.run()
        log.info(f"{APP_NAME} exited normally")
        return status
    except Exception as e:
        log.critical(f"{APP_NAME} crashed: {e}", exc_info=True)
        raise


if __name__ == "__main__":  # pragma: no cover - import guard
    sys.exit(main())
