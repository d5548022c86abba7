"""Run remote store calls off the UI thread and report back on it."""

from __future__ import annotations

import contextlib
import itertools
import logging
from collections.abc import Callable
from typing import Any, Protocol

from PyQt5.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal

from tododesk.services.types import StoreError

log = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[str], None]


def _call(fn: Callable[[], Any]) -> tuple[Any, str | None]:
    """Invoke ``fn`` and return ``(result, error_message)``."""

    try:
        return fn(), None
    except StoreError as exc:
        return None, exc.message
    except Exception as exc:  # anything else must not escape into the event loop
        log.error("Unexpected failure in store call: %s", exc, exc_info=True)
        return None, str(exc) or type(exc).__name__


class JobRunner(Protocol):
    def submit(
        self,
        fn: Callable[[], Any],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None: ...


class InlineRunner:
    """Run the call immediately on the calling thread."""

    def submit(
        self,
        fn: Callable[[], Any],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        result, error = _call(fn)
        if error is not None:
            on_failure(error)
        else:
            on_success(result)


class _StoreCallSignals(QObject):
    finished = pyqtSignal(int, object, object)


class _StoreCallJob(QRunnable):
    """QRunnable wrapper around a single store call."""

    def __init__(self, token: int, fn: Callable[[], Any]) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self.signals = _StoreCallSignals()
        self._token = token
        self._fn = fn

    def run(self) -> None:  # pragma: no cover - Qt runs this on a worker thread
        result, error = _call(self._fn)
        # Signals object may already be destroyed during app shutdown
        with contextlib.suppress(RuntimeError):
            self.signals.finished.emit(self._token, result, error)


class ThreadPoolRunner(QObject):
    """Dispatch store calls on a thread pool.

    Completions arrive through a queued signal, so callbacks always run on the
    thread that owns the runner (the GUI thread).
    """

    def __init__(self, pool: QThreadPool | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._tokens = itertools.count(1)
        self._pending: dict[int, tuple[SuccessCallback, FailureCallback]] = {}

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def submit(
        self,
        fn: Callable[[], Any],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        token = next(self._tokens)
        self._pending[token] = (on_success, on_failure)
        job = _StoreCallJob(token, fn)
        job.signals.finished.connect(self._handle_finished)
        self._pool.start(job)

    def _handle_finished(self, token: int, result: Any, error: str | None) -> None:
        callbacks = self._pending.pop(token, None)
        if callbacks is None:
            return
        on_success, on_failure = callbacks
        if error is not None:
            on_failure(error)
        else:
            on_success(result)
