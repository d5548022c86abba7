from PyQt5.QtWidgets import QMessageBox

from fakes import FakeStore, make_task
from tododesk.ui.jobs import InlineRunner
from tododesk.ui.main_window import TodoMainWindow


def _make_window(monkeypatch, rows=None):
    dialogs = []
    monkeypatch.setattr(QMessageBox, "critical", lambda *args: dialogs.append(("critical", args[-1])))
    monkeypatch.setattr(QMessageBox, "warning", lambda *args: dialogs.append(("warning", args[-1])))
    store = FakeStore(rows)
    window = TodoMainWindow(store, runner=InlineRunner())
    return window, store, dialogs


def test_first_show_triggers_exactly_one_load(qapp, monkeypatch):
    window, store, _ = _make_window(monkeypatch, [make_task(1, "a")])
    assert store.count("list") == 0

    window.show()
    window.hide()
    window.show()

    assert store.count("list") == 1
    assert [t.task for t in window.controller.tasks] == ["a"]
    window.close()


def test_mutation_failures_raise_blocking_alert(qapp, monkeypatch):
    window, store, dialogs = _make_window(monkeypatch, [make_task(1, "a")])
    window.show()
    store.fail("delete", "permission denied")

    window.controller.delete(1)

    assert dialogs == [("critical", "Failed to delete todo: permission denied")]
    window.close()


def test_blank_add_shows_warning(qapp, monkeypatch):
    window, store, dialogs = _make_window(monkeypatch, [])
    window.show()

    window.todo_widget.add_button.click()

    assert dialogs == [("warning", "Todo task cannot be empty!")]
    assert store.count("insert") == 0
    window.close()


def test_load_failure_does_not_alert(qapp, monkeypatch):
    window, store, dialogs = _make_window(monkeypatch, [])
    store.fail("list", "offline")
    window.show()

    assert dialogs == []
    assert window.todo_widget.error_label.text() == "Error: offline"
    window.close()


def test_reload_recovers_from_a_failed_mutation(qapp, monkeypatch):
    window, store, dialogs = _make_window(monkeypatch, [make_task(1, "a"), make_task(2, "b", offset=1)])
    window.show()
    store.fail("update", "timeout")
    window.controller.toggle_complete(1, False)
    assert window.todo_widget.table.isHidden()
    assert window.controller.error == "timeout"

    stale = window.controller
    window.reload_action.trigger()

    assert window.controller is not stale
    assert window.centralWidget() is window.todo_widget
    assert window.controller.error is None
    assert window.todo_widget.error_label.isHidden()
    assert not window.todo_widget.table.isHidden()
    assert window.todo_widget.model.rowCount() == 2
    assert store.count("list") == 2
    assert dialogs == [("critical", "Failed to update todo: timeout")]

    # showing again after a reload does not fetch a third time
    window.hide()
    window.show()
    assert store.count("list") == 2
    window.close()


def test_reload_is_in_the_view_menu_with_shortcuts(qapp, monkeypatch):
    window, _, _ = _make_window(monkeypatch, [])
    view_menu = window.menuBar().actions()[1].menu()

    assert window.reload_action in view_menu.actions()
    shortcuts = {s.toString() for s in window.reload_action.shortcuts()}
    assert "Ctrl+R" in shortcuts
    assert "F5" in shortcuts
    window.close()
