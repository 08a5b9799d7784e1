import pytest

from exceptions import ConfigurationError
from game.config import EvaluatorConfig


def test_defaults():
    config = EvaluatorConfig()
    assert config.log_level == "INFO"
    assert config.log_file is None
    assert config.json_output is False


def test_level_is_normalized():
    assert EvaluatorConfig(log_level="debug").log_level == "DEBUG"


def test_invalid_level():
    with pytest.raises(ConfigurationError, match="Unknown log level"):
        EvaluatorConfig(log_level="LOUD")


def test_blank_log_file():
    with pytest.raises(ConfigurationError):
        EvaluatorConfig(log_file="  ")


def test_from_env(monkeypatch):
    monkeypatch.setattr("game.config.load_dotenv", lambda: None)
    monkeypatch.setenv("POKER_LOG_LEVEL", "warning")
    monkeypatch.setenv("POKER_LOG_FILE", "hands.log")
    monkeypatch.setenv("POKER_JSON_OUTPUT", "yes")

    config = EvaluatorConfig.from_env()

    assert config.log_level == "WARNING"
    assert config.log_file == "hands.log"
    assert config.json_output is True


def test_from_env_defaults(monkeypatch):
    monkeypatch.setattr("game.config.load_dotenv", lambda: None)
    config = EvaluatorConfig.from_env()
    assert config == EvaluatorConfig()


def test_from_env_bad_boolean(monkeypatch):
    monkeypatch.setattr("game.config.load_dotenv", lambda: None)
    monkeypatch.setenv("POKER_JSON_OUTPUT", "maybe")
    with pytest.raises(ConfigurationError, match="boolean"):
        EvaluatorConfig.from_env()
