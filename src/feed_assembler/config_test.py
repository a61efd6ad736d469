"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from .config import DEFAULT_BASE_URL, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.connect_timeout == 30.0
    assert settings.timeout == 30.0
    assert settings.log_level == "INFO"


def test_reads_environment():
    settings = load_settings(
        {
            "FEED_BASE_URL": "http://feed.test/api/",
            "FEED_CONNECT_TIMEOUT": "2",
            "FEED_TIMEOUT": "4.5",
            "FEED_LOG_LEVEL": "DEBUG",
        }
    )
    assert settings.base_url == "http://feed.test/api/"
    assert settings.connect_timeout == 2.0
    assert settings.timeout == 4.5
    assert settings.log_level == "DEBUG"


def test_overrides_win_and_none_is_ignored():
    settings = load_settings(
        {"FEED_BASE_URL": "http://env/", "FEED_TIMEOUT": "9"},
        base_url="http://flag/",
        timeout=None,
    )
    assert settings.base_url == "http://flag/"
    assert settings.timeout == 9.0


@pytest.mark.parametrize("value", ["0", "-1", "soon"])
def test_invalid_timeout_rejected(value):
    with pytest.raises(ValidationError):
        load_settings({"FEED_TIMEOUT": value})


def test_flag_left_unset_keeps_environment_value():
    settings = load_settings(
        {"FEED_BASE_URL": "http://env/", "FEED_LOG_LEVEL": "DEBUG"},
        base_url=None,
        timeout=None,
        log_level=None,
    )
    assert settings.base_url == "http://env/"
    assert settings.log_level == "DEBUG"


def test_log_level_is_case_insensitive():
    assert load_settings({"FEED_LOG_LEVEL": "warning"}).log_level == "WARNING"


@pytest.mark.parametrize("value", ["loud", "", "TRACE"])
def test_invalid_log_level_rejected(value):
    with pytest.raises(ValidationError):
        load_settings({}, log_level=value)
