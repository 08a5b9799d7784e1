import logging
import sys
from typing import List, Optional

from data.dto import ComparisonDTO, HandDTO
from exceptions import ParseError
from game import EvaluatorConfig, Hand, best_hand, compare
from loggers.hand_logger import HandLogger
from util import setup_logging

logger = logging.getLogger(__name__)

# Tables used when no hands are given on the command line
SHOWDOWN_SCENARIOS = [
    ("Four of a Kind vs Straight", ["AC AD AH AS KC", "2C 3D 4S 5H 6C"]),
    ("Full House vs Flush", ["2H 2D 2S 9C 9D", "2C 3C 4C 5C 7C"]),
    ("Kicker decides", ["AH AD QS JC 9D", "AC AS QC JH 8D"]),
    ("Wheel vs six-high straight", ["AH 2D 3S 4C 5D", "2H 3D 4S 5C 6D"]),
    ("Royal flush", ["TH JH QH KH AH", "9D TD JD QD KD"]),
    ("Split pot", ["2H 3D 5S 9C KD", "2C 3S 5D 9H KH", "2D 3C 5H 8S KS"]),
]


def classify(hand_text: str, config: EvaluatorConfig) -> None:
    hand = Hand(hand_text)
    if config.json_output:
        sys.stdout.write(HandDTO.from_hand(hand).model_dump_json(indent=2) + "\n")
        return
    HandLogger.log_hand("Hand", str(hand), hand.category_name)
    logger.info(hand.show())


def head_to_head(first_text: str, second_text: str, config: EvaluatorConfig) -> None:
    first, second = Hand(first_text), Hand(second_text)
    result = compare(first, second)
    if config.json_output:
        report = ComparisonDTO.from_hands(first, second, result)
        sys.stdout.write(report.model_dump_json(indent=2) + "\n")
        return
    HandLogger.log_hand("Hand 1", str(first), first.category_name)
    HandLogger.log_hand("Hand 2", str(second), second.category_name)


def run_showdowns() -> None:
    for title, hand_texts in SHOWDOWN_SCENARIOS:
        HandLogger.log_showdown_start(title)
        hands = [Hand(text) for text in hand_texts]
        for index, hand in enumerate(hands, start=1):
            HandLogger.log_hand(f"Hand {index}", str(hand), hand.category_name)
        HandLogger.log_showdown_winner([str(hand) for hand in best_hand(hands)])


def main(argv: Optional[List[str]] = None) -> int:
    """
    Evaluate hands given on the command line.

    One hand is classified, two hands are compared, and with no hands the
    built-in showdown scenarios are played. --json switches output to JSON.

    Returns:
        int: Process exit code, 1 if any hand could not be parsed
    """
    args = list(sys.argv[1:] if argv is None else argv)
    config = EvaluatorConfig.from_env()
    if "--json" in args:
        args.remove("--json")
        config.json_output = True

    # JSON goes to stdout, so log lines go to stderr
    console = sys.stderr if config.json_output else sys.stdout
    setup_logging(config.log_level, config.log_file, stream=console)

    try:
        if not args:
            run_showdowns()
        elif len(args) == 1:
            classify(args[0], config)
        elif len(args) == 2:
            head_to_head(args[0], args[1], config)
        else:
            HandLogger.log_error("Usage: main.py [--json] [HAND [HAND]]")
            return 2
    except ParseError as e:
        HandLogger.log_error(f"Invalid hand: {str(e)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
