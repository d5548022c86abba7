"""Feature switches read from the ``TODODESK_FEATURES`` environment variable.

The variable holds a comma-separated list. A bare name turns a feature on,
a ``!`` or ``-`` prefix turns it off, and ``name=value`` accepts the usual
boolean spellings (``1/0``, ``on/off``, ``yes/no`` ...). Unknown values are
ignored.

    TODODESK_FEATURES="resort_on_insert"       # on
    TODODESK_FEATURES="!resort_on_insert"      # off
    TODODESK_FEATURES="resort_on_insert=no"    # off
"""

from __future__ import annotations

import os
from functools import lru_cache

ENV_VAR = "TODODESK_FEATURES"

RESORT_ON_INSERT = "resort_on_insert"

_BOOL_WORDS = {
    "1": True,
    "true": True,
    "on": True,
    "yes": True,
    "enable": True,
    "enabled": True,
    "0": False,
    "false": False,
    "off": False,
    "no": False,
    "disable": False,
    "disabled": False,
}


def _key(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def parse_features(raw: str) -> dict[str, bool]:
    """Turn a ``TODODESK_FEATURES`` string into a ``{name: enabled}`` map."""

    features: dict[str, bool] = {}
    for token in (part.strip() for part in raw.split(",")):
        if not token:
            continue
        if token[0] in "!-":
            features[_key(token[1:])] = False
        elif "=" in token:
            name, value = token.split("=", 1)
            state = _BOOL_WORDS.get(value.strip().lower())
            if state is not None:
                features[_key(name)] = state
        else:
            features[_key(token)] = True
    return features


@lru_cache(maxsize=1)
def _features() -> dict[str, bool]:
    return parse_features(os.environ.get(ENV_VAR, ""))


def reload() -> None:
    """Re-read the environment on the next lookup."""

    _features.cache_clear()


def all_enabled() -> dict[str, bool]:
    return dict(_features())


def is_enabled(flag: str, *, default: bool = False) -> bool:
    """Return whether ``flag`` is switched on."""

    if not flag:
        raise ValueError("Flag name must be a non-empty string")
    return _features().get(_key(flag), default)
