import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QApplication

from tododesk.app import flags


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _clean_features(monkeypatch):
    monkeypatch.delenv(flags.ENV_VAR, raising=False)
    flags.reload()
    yield
    flags.reload()
