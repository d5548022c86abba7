"""Application bootstrap helpers."""

from importlib import import_module

__all__ = ["TodoDeskLauncher", "all_enabled", "is_enabled", "reload"]


def __getattr__(name: str):
    if name == "TodoDeskLauncher":
        module = import_module("tododesk.app.launcher")
        value = module.TodoDeskLauncher
    elif name in {"all_enabled", "is_enabled", "reload"}:
        module = import_module("tododesk.app.flags")
        value = getattr(module, name)
    else:
        raise AttributeError(f"module 'tododesk.app' has no attribute {name!r}")
    globals()[name] = value
    return value
