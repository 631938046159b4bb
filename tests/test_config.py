"""Tests for configuration loading."""

import pytest

from memento.config import DemoConfig, load_config
from memento.errors import ConfigError
from memento.utils.env import is_debug_mode


def test_defaults():
    config = load_config()

    assert config == DemoConfig(initial_state="initial_state", token_length=5, debug=False)


def test_overrides_win_and_none_is_ignored():
    config = load_config({"initialState": "seed", "tokenLength": None})

    assert config.initial_state == "seed"
    assert config.token_length == 5


@pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
def test_debug_from_env(monkeypatch, value):
    monkeypatch.setenv("MEMENTO_DEBUG", value)

    assert is_debug_mode()
    assert load_config().debug is True


def test_debug_off_by_default():
    assert not is_debug_mode()


@pytest.mark.parametrize(
    "data",
    [{"tokenLength": 0}, {"tokenLength": 33}, {"tokenLength": "5"}, {"tokenLength": True}, {"initialState": 3}],
)
def test_invalid_values(data):
    with pytest.raises(ConfigError):
        load_config(data)


def test_round_trip_dict():
    config = DemoConfig(initial_state="x", token_length=7, debug=True)

    assert DemoConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("false", False), ("0", False), ("off", False), ("", False), ("on", True), ("True", True), (True, True), (0, False)],
)
def test_debug_flag_parsing(raw, expected):
    assert DemoConfig.from_dict({"debug": raw}).debug is expected


def test_debug_override_false_beats_env(monkeypatch):
    monkeypatch.setenv("MEMENTO_DEBUG", "1")

    assert load_config({"debug": "false"}).debug is False


def test_longest_token_length_accepted():
    assert load_config({"tokenLength": 32}).token_length == 32
