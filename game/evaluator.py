from typing import List, NamedTuple, Tuple

from data.types.hand_rank import HandRank
from exceptions import WrongCardCountError

from .card import RANK_NAMES, Card

WHEEL_RANKS = [14, 5, 4, 3, 2]


class HandEvaluation(NamedTuple):
    """
    A named tuple containing the evaluation of a poker hand.

    Attributes:
        rank (HandRank): The category of the hand (HIGH_CARD to STRAIGHT_FLUSH)
        tiebreakers (Tuple[int, ...]): One rank per group of equal cards, in
            order of importance
        description (str): Human readable description of the hand
    """

    rank: HandRank
    tiebreakers: Tuple[int, ...]
    description: str


def evaluate_hand(cards: List[Card]) -> HandEvaluation:
    """
    Evaluate a 5-card poker hand and return its category, tiebreakers, and description.

    Args:
        cards (List[Card]): Exactly 5 cards, in any order.

    Returns:
        HandEvaluation: A named tuple containing:
            - HandRank: Category from HIGH_CARD to STRAIGHT_FLUSH
            - Tuple[int, ...]: Tiebreaker ranks in descending order of importance
            - str: Human readable description of the hand

    Hand Rankings (from best to worst):
        1. Straight Flush  - Five sequential cards of the same suit (royal flush included)
        2. Four of a Kind  - Four cards of the same rank
        3. Full House      - Three of a kind plus a pair
        4. Flush           - Any five cards of the same suit
        5. Straight        - Five sequential cards of mixed suits
        6. Three of a Kind - Three cards of the same rank
        7. Two Pair        - Two different pairs
        8. One Pair        - One pair of matching cards
        9. High Card       - Highest card when no other hand is made

    Tiebreakers are built by grouping equal ranks, ordering the groups by
    size then rank (both descending) and taking one rank per group. In an
    ace-low straight (A-2-3-4-5) the first tiebreaker is 5, not 14.

    Raises:
        WrongCardCountError: If the hand doesn't contain exactly 5 cards

    Example:
        >>> evaluate_hand(parse_hand("TH JH QH KH AH"))
        HandEvaluation(rank=<HandRank.STRAIGHT_FLUSH: (8, 'Straight Flush')>, tiebreakers=(14, 13, 12, 11, 10), description='Straight Flush, Ace high')
    """
    if len(cards) != 5:
        raise WrongCardCountError(len(cards))

    ranks = sorted((card.rank for card in cards), reverse=True)

    is_flush = len({card.suit for card in cards}) == 1
    is_wheel = ranks == WHEEL_RANKS
    is_straight = is_wheel or all(
        high - low == 1 for high, low in zip(ranks, ranks[1:])
    )

    # Count occurrences of each rank
    rank_counts = {}
    for rank in ranks:
        rank_counts[rank] = rank_counts.get(rank, 0) + 1

    # Sort by count desc, then rank desc
    groups = sorted(
        ((count, rank) for rank, count in rank_counts.items()), reverse=True
    )
    counts = [count for count, _ in groups]
    tiebreakers = [rank for _, rank in groups]

    if is_wheel:
        tiebreakers[0] = 5  # Ace plays low

    category = _categorize(is_flush, is_straight, counts)
    return HandEvaluation(
        category, tuple(tiebreakers), _describe(category, tiebreakers)
    )


def _categorize(is_flush: bool, is_straight: bool, counts: List[int]) -> HandRank:
    """Pick the category; earlier checks take priority."""
    if is_straight and is_flush:
        return HandRank.STRAIGHT_FLUSH
    elif counts[0] == 4:
        return HandRank.FOUR_OF_KIND
    elif counts[0] == 3 and counts[1] == 2:
        return HandRank.FULL_HOUSE
    elif is_flush:
        return HandRank.FLUSH
    elif is_straight:
        return HandRank.STRAIGHT
    elif counts[0] == 3:
        return HandRank.THREE_OF_KIND
    elif counts[0] == 2 and counts[1] == 2:
        return HandRank.TWO_PAIR
    elif counts[0] == 2:
        return HandRank.ONE_PAIR
    else:
        return HandRank.HIGH_CARD


def _describe(category: HandRank, tiebreakers: List[int]) -> str:
    """Build a readable summary such as "Full House, Kings over Fives"."""
    names = [_rank_to_name(rank) for rank in tiebreakers]

    if category in (
        HandRank.STRAIGHT_FLUSH,
        HandRank.FLUSH,
        HandRank.STRAIGHT,
        HandRank.HIGH_CARD,
    ):
        return f"{category}, {names[0]} high"
    elif category == HandRank.FULL_HOUSE:
        return f"{category}, {_plural(names[0])} over {_plural(names[1])}"
    elif category == HandRank.TWO_PAIR:
        return f"{category}, {_plural(names[0])} and {_plural(names[1])}"
    return f"{category}, {_plural(names[0])}"


def _rank_to_name(rank: int) -> str:
    """Convert numeric rank to card name."""
    return RANK_NAMES[rank]


def _plural(name: str) -> str:
    return f"{name}es" if name == "Six" else f"{name}s"
