from __future__ import annotations

import argparse
import sys

from .core.models import Task
from .core.repo_factory import get_store
from .services.types import TodoStore
from .ui.jobs import InlineRunner
from .ui.todo_controller import TodoController


class _Session:
    """Controller plus the outcome of the last operation."""

    def __init__(self, store: TodoStore) -> None:
        self.controller = TodoController(store, runner=InlineRunner())
        self.failed = False
        self.controller.warning_raised.connect(self._report)
        self.controller.alert_raised.connect(self._report)

    def _report(self, message: str) -> None:
        self.failed = True
        print(message, file=sys.stderr)

    def load(self) -> bool:
        self.controller.activate()
        if self.controller.error:
            print(f"Error: {self.controller.error}", file=sys.stderr)
            return False
        return True

    def lookup(self, raw_id: str) -> Task | None:
        for task in self.controller.tasks:
            if str(task.id) == raw_id:
                return task
        print(f"No todo with id {raw_id}", file=sys.stderr)
        return None


def _format(task: Task) -> str:
    mark = "x" if task.is_complete else " "
    return f"[{mark}] {task.id}\t{task.task}"


def cmd_list(args: argparse.Namespace, session: _Session) -> int:
    if not session.load():
        return 1
    tasks = session.controller.tasks
    if not tasks:
        print("No todos yet! Add one above.")
    for task in tasks:
        print(_format(task))
    return 0


def cmd_add(args: argparse.Namespace, session: _Session) -> int:
    text = " ".join(args.text)
    before = len(session.controller.tasks)
    session.controller.add(text)
    if session.failed:
        return 1
    added = session.controller.tasks[before:]
    for task in added:
        print(f"Added {_format(task)}")
    return 0


def cmd_toggle(args: argparse.Namespace, session: _Session) -> int:
    if not session.load():
        return 1
    task = session.lookup(args.id)
    if task is None:
        return 1
    session.controller.toggle_complete(task.id, task.is_complete)
    if session.failed:
        return 1
    updated = session.controller.find(task.id)
    if updated is not None:
        print(_format(updated))
    return 0


def cmd_delete(args: argparse.Namespace, session: _Session) -> int:
    if not session.load():
        return 1
    task = session.lookup(args.id)
    if task is None:
        return 1
    session.controller.delete(task.id)
    if session.failed:
        return 1
    print(f"Deleted {task.id}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("tododesk-cli")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("list", help="show all todos, oldest first")
    sp.set_defaults(func=cmd_list)

    sp = sub.add_parser("add", help="create a todo")
    sp.add_argument("text", nargs="+")
    sp.set_defaults(func=cmd_add)

    sp = sub.add_parser("toggle", help="flip a todo's completion")
    sp.add_argument("id")
    sp.set_defaults(func=cmd_toggle)

    sp = sub.add_parser("delete", help="remove a todo")
    sp.add_argument("id")
    sp.set_defaults(func=cmd_delete)

    return parser


def main(argv: list[str] | None = None, *, store: TodoStore | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    session = _Session(store if store is not None else get_store())
    return args.func(args, session)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
