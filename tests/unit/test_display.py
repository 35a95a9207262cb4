import re

import pytest
from pydantic import ValidationError

from matchkit.config import MatchkitSettings, get_settings, reset_settings
from matchkit.display import display_string
from matchkit.matchers import contain_only_digits


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "<null>"),
        ("", "<empty string>"),
        ("abc", '"abc"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a\tb\r\n", '"a\\tb\\r\\n"'),
        ("back\\slash", '"back\\\\slash"'),
        (["a", None], '["a", <null>]'),
        (("x", ""), '["x", <empty string>]'),
        (re.compile(r"\d+"), r"\d+"),
        (42, "42"),
    ],
)
def test_display_string(value, expected):
    assert display_string(value) == expected


def test_long_strings_are_truncated(monkeypatch):
    monkeypatch.setenv("MATCHKIT_DISPLAY_MAX_LENGTH", "5")

    assert display_string("abcdefgh") == '"abcde..."'
    assert display_string("abcde") == '"abcde"'


def test_zero_max_length_disables_truncation(monkeypatch):
    monkeypatch.setenv("MATCHKIT_DISPLAY_MAX_LENGTH", "0")

    assert display_string("a" * 500) == '"' + "a" * 500 + '"'


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("MATCHKIT_DISPLAY_MAX_LENGTH", raising=False)
    monkeypatch.delenv("MATCHKIT_LOG_OUTCOMES", raising=False)

    settings = get_settings()

    assert settings.display_max_length == 200
    assert settings.log_outcomes is False
    assert get_settings() is settings


def test_settings_reject_negative_max_length():
    with pytest.raises(ValueError):
        MatchkitSettings(display_max_length=-1)


def test_settings_reject_unknown_fields():
    with pytest.raises(ValueError):
        MatchkitSettings(unknown_option=True)


def test_malformed_setting_fails_every_evaluation(monkeypatch):
    monkeypatch.setenv("MATCHKIT_DISPLAY_MAX_LENGTH", "x")

    with pytest.raises(ValidationError):
        get_settings()
    with pytest.raises(ValidationError):
        contain_only_digits().test("123")

    monkeypatch.setenv("MATCHKIT_DISPLAY_MAX_LENGTH", "10")
    reset_settings()

    assert contain_only_digits().test("123").passed
