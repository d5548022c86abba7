from fakes import FakeStore, make_task
from tododesk.app.launcher import TodoDeskLauncher
from tododesk.ui import theme
from tododesk.ui.main_window import TodoMainWindow


def test_launcher_reuses_the_running_app_and_builds_the_window(qapp):
    store = FakeStore([make_task(1, "a")])
    launcher = TodoDeskLauncher(store=store)

    assert launcher.app is qapp
    assert isinstance(launcher.window, TodoMainWindow)
    # nothing is fetched until the window is shown
    assert store.calls == []
    launcher.window.deleteLater()
    theme.set_theme_mode("light", persist=False)
