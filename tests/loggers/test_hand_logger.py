from unittest.mock import patch

from data.enums import Comparison
from loggers.hand_logger import HandLogger


def test_log_comparison_wording():
    with patch("loggers.hand_logger.logger") as mock_logger:
        HandLogger.log_comparison("AH AD QS JC 9D", "AC AS QC JH 8D", Comparison.GREATER)
        HandLogger.log_comparison("A", "B", Comparison.LESS)
        HandLogger.log_comparison("A", "B", Comparison.EQUAL)

    messages = [call.args[0] for call in mock_logger.info.call_args_list]
    assert messages == [
        "AH AD QS JC 9D beats AC AS QC JH 8D",
        "A loses to B",
        "A ties with B",
    ]


def test_log_showdown_winner():
    with patch("loggers.hand_logger.logger") as mock_logger:
        HandLogger.log_showdown_winner(["TH JH QH KH AH"])
        HandLogger.log_showdown_winner(["2H 3D 5S 9C KD", "2C 3S 5D 9H KH"])

    messages = [call.args[0] for call in mock_logger.info.call_args_list]
    assert messages == [
        "Winner: TH JH QH KH AH",
        "Split between: 2H 3D 5S 9C KD, 2C 3S 5D 9H KH",
    ]


def test_log_parse_error_is_warning():
    with patch("loggers.hand_logger.logger") as mock_logger:
        HandLogger.log_parse_error("2H", ValueError("Hand must contain exactly 5 cards, got 1"))
    mock_logger.warning.assert_called_once_with(
        "Could not parse hand '2H': Hand must contain exactly 5 cards, got 1"
    )
