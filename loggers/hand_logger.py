import logging
from typing import List

logger = logging.getLogger(__name__)


class HandLogger:
    """Handles all logging operations for hand parsing, evaluation and comparison."""

    @staticmethod
    def log_parse_error(text: str, error: Exception) -> None:
        """Log a hand string that could not be parsed."""
        logger.warning(f"Could not parse hand {text!r}: {str(error)}")

    @staticmethod
    def log_evaluation(
        cards: List[str],
        description: str,
        rank,
        tiebreakers: List[int],
    ) -> None:
        """Log detailed hand evaluation information."""
        logger.debug(f"Cards: {' '.join(cards)}")
        logger.debug(f"  Hand: {description}")
        logger.debug(f"  Rank: {rank}")
        logger.debug(f"  Tiebreakers: {tiebreakers}")

    @staticmethod
    def log_comparison(first_hand: str, second_hand: str, result) -> None:
        """Log the outcome of comparing two hands, from the first hand's side."""
        outcome = {"greater": "beats", "less": "loses to", "equal": "ties with"}[
            result.value
        ]
        logger.info(f"{first_hand} {outcome} {second_hand}")

    @staticmethod
    def log_hand(label: str, hand_text: str, category_name: str) -> None:
        """Log a hand shown by the driver."""
        logger.info(f"{label}: {hand_text} ({category_name})")

    @staticmethod
    def log_showdown_start(title: str) -> None:
        logger.info(f"\n=== {title} ===")

    @staticmethod
    def log_showdown_winner(winners: List[str]) -> None:
        """Log the winning hand, or every hand in a split."""
        if len(winners) == 1:
            logger.info(f"Winner: {winners[0]}")
        else:
            logger.info(f"Split between: {', '.join(winners)}")

    @staticmethod
    def log_error(message: str) -> None:
        logger.error(message)
