# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Static application metadata."""

from typing import Final

APP_NAME: Final[str] = "TodoDesk"
APP_VERSION: Final[str] = "v1.0.0"
ORGANIZATION: Final[str] = "TodoDesk"
