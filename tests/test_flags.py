import pytest

from tododesk.app import flags


def test_parse_features_handles_all_spellings():
    parsed = flags.parse_features(" resort-on-insert, !beta ,-gamma, delta=off, eps=YES, bad=maybe,, ")
    assert parsed == {
        "resort_on_insert": True,
        "beta": False,
        "gamma": False,
        "delta": False,
        "eps": True,
    }


def test_is_enabled_reads_environment(monkeypatch):
    assert flags.is_enabled(flags.RESORT_ON_INSERT) is False
    assert flags.is_enabled("missing", default=True) is True

    monkeypatch.setenv(flags.ENV_VAR, "Resort_On_Insert")
    # cached until reload
    assert flags.is_enabled(flags.RESORT_ON_INSERT) is False
    flags.reload()
    assert flags.is_enabled(flags.RESORT_ON_INSERT) is True
    assert flags.all_enabled() == {"resort_on_insert": True}


def test_empty_flag_name_is_rejected():
    with pytest.raises(ValueError):
        flags.is_enabled("")


def test_documented_examples_parse():
    assert flags.parse_features("resort_on_insert") == {"resort_on_insert": True}
    assert flags.parse_features("!resort_on_insert") == {"resort_on_insert": False}
    assert flags.parse_features("resort_on_insert=no") == {"resort_on_insert": False}
