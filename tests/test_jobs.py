import time

from PyQt5.QtCore import QCoreApplication, QThread, QThreadPool

from tododesk.services.types import StoreError
from tododesk.ui.jobs import InlineRunner, ThreadPoolRunner


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.01)
    return predicate()


def _store_error():
    raise StoreError("nope")


def test_inline_runner_routes_results_and_errors():
    runner = InlineRunner()
    ok, failed = [], []

    runner.submit(lambda: 42, ok.append, failed.append)
    runner.submit(_store_error, ok.append, failed.append)
    runner.submit(lambda: 1 / 0, ok.append, failed.append)

    assert ok == [42]
    assert failed[0] == "nope"
    assert "division" in failed[1]


def test_thread_pool_runner_delivers_on_owner_thread(qapp):
    pool = QThreadPool()
    runner = ThreadPoolRunner(pool)
    worker_threads, callback_threads, results = [], [], []

    def _work():
        worker_threads.append(QThread.currentThread())
        return "done"

    def _on_success(value):
        callback_threads.append(QThread.currentThread())
        results.append(value)

    runner.submit(_work, _on_success, results.append)
    assert pool.waitForDone(5000)
    assert _wait_for(lambda: results)

    assert results == ["done"]
    assert callback_threads == [qapp.thread()]
    assert worker_threads and worker_threads[0] is not qapp.thread()
    assert runner.pending_count == 0


def test_thread_pool_runner_reports_failures(qapp):
    pool = QThreadPool()
    runner = ThreadPoolRunner(pool)
    ok, failed = [], []

    runner.submit(_store_error, ok.append, failed.append)
    assert pool.waitForDone(5000)
    assert _wait_for(lambda: failed)

    assert ok == []
    assert failed == ["nope"]
