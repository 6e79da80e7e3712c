import pytest

from lazycell import config, ConfigurationError


def test_parse_bool(monkeypatch):
    monkeypatch.setenv("LAZYCELL_TEST_FLAG", "Yes")
    assert config._parse_bool("LAZYCELL_TEST_FLAG", False) is True
    monkeypatch.setenv("LAZYCELL_TEST_FLAG", "off")
    assert config._parse_bool("LAZYCELL_TEST_FLAG", True) is False
    monkeypatch.delenv("LAZYCELL_TEST_FLAG")
    assert config._parse_bool("LAZYCELL_TEST_FLAG", True) is True


def test_parse_bool_invalid(monkeypatch):
    monkeypatch.setenv("LAZYCELL_TEST_FLAG", "maybe")
    with pytest.raises(ConfigurationError):
        config._parse_bool("LAZYCELL_TEST_FLAG", False)


def test_setters_reject_non_bool():
    with pytest.raises(ConfigurationError):
        config.set_deduplicate_invalidation(1)
    with pytest.raises(ConfigurationError):
        config.set_freeze_arrays("yes")


def test_error_str():
    assert str(ConfigurationError("bad")) == "ConfigurationError: bad"
