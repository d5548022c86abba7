import logging

import pytest

from tododesk.core import settings as store_settings
from tododesk.services import store_client
from tododesk.services.store_client import UnconfiguredClient, create_store_client
from tododesk.services.types import StoreError

_ALL_ENV = (*store_settings.URL_ENV_NAMES, *store_settings.KEY_ENV_NAMES, "TODODESK_TABLE")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in _ALL_ENV:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    store_settings.reload()
    store_client.get_store_client.cache_clear()
    yield tmp_path
    store_settings.reload()
    store_client.get_store_client.cache_clear()


def _recording_factory(calls, result=None, error=None):
    def _create(url, key):
        calls.append((url, key))
        if error is not None:
            raise error
        return result

    return _create


def test_settings_default_to_empty(clean_env):
    cfg = store_settings.StoreSettings()
    assert cfg.supabase_url == ""
    assert cfg.supabase_anon_key == ""
    assert cfg.todos_table == "todos"


def test_settings_accept_react_style_names(clean_env, monkeypatch):
    monkeypatch.setenv("REACT_APP_SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("REACT_APP_SUPABASE_ANON_KEY", "anon-key")
    cfg = store_settings.StoreSettings()
    assert cfg.supabase_url == "https://example.supabase.co"
    assert cfg.supabase_anon_key == "anon-key"


def test_settings_read_dotenv(clean_env):
    (clean_env / ".env").write_text(
        "SUPABASE_URL=https://dotenv.supabase.co\nSUPABASE_ANON_KEY=k\nTODODESK_TABLE=todos_dev\n",
        encoding="utf-8",
    )
    cfg = store_settings.StoreSettings()
    assert cfg.supabase_url == "https://dotenv.supabase.co"
    assert cfg.todos_table == "todos_dev"


def test_missing_config_logs_and_still_constructs(clean_env, monkeypatch, caplog):
    calls = []
    sentinel = object()
    monkeypatch.setattr(store_client, "create_client", _recording_factory(calls, result=sentinel))

    with caplog.at_level(logging.ERROR, logger="tododesk.services.store_client"):
        client = create_store_client("", None)

    assert client is sentinel
    assert calls == [("", "")]
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "SUPABASE_URL" in errors[0].getMessage()


def test_complete_config_logs_nothing(clean_env, monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(store_client, "create_client", _recording_factory(calls, result=object()))

    with caplog.at_level(logging.DEBUG, logger="tododesk.services.store_client"):
        create_store_client("https://example.supabase.co", "key")

    assert calls == [("https://example.supabase.co", "key")]
    assert caplog.records == []


def test_rejected_config_fails_at_call_time(clean_env, monkeypatch):
    monkeypatch.setattr(
        store_client,
        "create_client",
        _recording_factory([], error=ValueError("supabase_url is required")),
    )

    client = create_store_client(None, None)

    assert isinstance(client, UnconfiguredClient)
    with pytest.raises(StoreError, match="supabase_url is required"):
        client.table("todos")


def test_shared_handle_is_created_once(clean_env, monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "key")
    calls = []
    monkeypatch.setattr(store_client, "create_client", _recording_factory(calls, result=object()))

    first = store_client.get_store_client()
    second = store_client.get_store_client()

    assert first is second
    assert calls == [("https://example.supabase.co", "key")]
