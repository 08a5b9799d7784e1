import pytest

from game.hand import Hand


@pytest.fixture(autouse=True)
def setup_logging():
    """Automatically disable logging for all tests."""
    import logging

    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep evaluator settings from the host environment out of tests."""
    for name in ("POKER_LOG_LEVEL", "POKER_LOG_FILE", "POKER_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def royal_flush():
    """Royal flush in hearts"""
    return Hand("TH JH QH KH AH")


@pytest.fixture
def wheel():
    """Ace-low straight"""
    return Hand("AH 2D 3S 4C 5D")


@pytest.fixture
def six_high_straight():
    return Hand("2H 3D 4S 5C 6D")


@pytest.fixture
def two_pair():
    """Fives and twos with a king kicker"""
    return Hand("2H 2D 5S 5C KD")
