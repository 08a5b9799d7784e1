from typing import List

from exceptions import ParseError, WrongCardCountError
from loggers.hand_logger import HandLogger

from .card import Card

HAND_SIZE = 5


def parse_hand(text: str) -> List[Card]:
    """
    Parse a whitespace-separated hand such as "9H 7S TH JS 8D" into cards.

    Tokens are validated in order, so a malformed token is reported before
    the card count is checked. Duplicate cards are accepted as given; there
    is no shared deck to check them against.

    Args:
        text (str): Hand text, case-insensitive

    Returns:
        List[Card]: Exactly five cards sorted by descending rank. Cards of
            equal rank keep their input order.

    Raises:
        MalformedTokenError: If a token is not two characters
        InvalidRankError: If a token has an unknown rank character
        InvalidSuitError: If a token has an unknown suit character
        WrongCardCountError: If the text holds a number of cards other than five
    """
    try:
        cards = [Card.from_token(token) for token in text.split()]
        if len(cards) != HAND_SIZE:
            raise WrongCardCountError(len(cards), text=text)
    except ParseError as e:
        HandLogger.log_parse_error(text, e)
        raise

    # sorted() is stable, so equal ranks keep input order
    return sorted(cards, key=lambda card: card.rank, reverse=True)
