from typing import Iterable, List

from data.enums import Comparison
from data.types.hand_rank import HandRank
from data.types.hand_types import HandState
from loggers.hand_logger import HandLogger

from .evaluator import evaluate_hand
from .parser import parse_hand


class Hand:
    """
    Represents a five-card poker hand with comparison capabilities based on
    poker hand rankings.

    A hand is built once from text such as "AH AD QS JC 9D" and is read-only
    afterwards. Its category and tiebreakers are evaluated at construction.
    Hands are compared by category first, then tiebreakers; higher is better.

    Attributes:
        cards (Tuple[Card, ...]): The five cards, sorted by descending rank
        category (HandRank): The hand's category
        tiebreakers (Tuple[int, ...]): Ranks used to break ties within a category
        description (str): Human readable description of the hand
    """

    __slots__ = ("cards", "category", "tiebreakers", "description")

    def __init__(self, hand_text: str) -> None:
        """
        Parse and evaluate a hand.

        Args:
            hand_text: Five whitespace-separated card tokens, e.g. "2H 3D 5S 9C KD"

        Raises:
            ParseError: If the text is not exactly five valid card tokens
        """
        cards = parse_hand(hand_text)
        category, tiebreakers, description = evaluate_hand(cards)

        object.__setattr__(self, "cards", tuple(cards))
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "tiebreakers", tiebreakers)
        object.__setattr__(self, "description", description)

        HandLogger.log_evaluation(
            [str(card) for card in cards], description, category, list(tiebreakers)
        )

    @classmethod
    def from_string(cls, hand_text: str) -> "Hand":
        return cls(hand_text)

    def __setattr__(self, name, value):
        raise AttributeError("Hand is immutable")

    @property
    def category_name(self) -> str:
        """Display name of the hand's category, e.g. "Two Pair"."""
        return self.category.display_name

    def compare_to(self, other: "Hand") -> Comparison:
        """Compare this hand to another hand.

        Returns:
            Comparison: GREATER if this hand is better, LESS if worse, EQUAL if tied
        """
        if self.category != other.category:
            if self.category > other.category:
                return Comparison.GREATER
            return Comparison.LESS

        # Same category, first differing tiebreaker decides (higher is better)
        for self_value, other_value in zip(self.tiebreakers, other.tiebreakers):
            if self_value != other_value:
                if self_value > other_value:
                    return Comparison.GREATER
                return Comparison.LESS

        return Comparison.EQUAL

    def __lt__(self, other: "Hand") -> bool:
        """Compare if this hand ranks lower than another hand."""
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) == Comparison.LESS

    def __le__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) != Comparison.GREATER

    def __gt__(self, other: "Hand") -> bool:
        """Compare if this hand ranks higher than another hand."""
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) == Comparison.GREATER

    def __ge__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) != Comparison.LESS

    def __eq__(self, other: object) -> bool:
        """Check if hands are equal in category and tiebreakers."""
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) == Comparison.EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) != Comparison.EQUAL

    def __hash__(self) -> int:
        return hash((self.category, self.tiebreakers))

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({str(self)!r})"

    def show(self) -> str:
        """
        Get a detailed string representation of the hand.

        Returns:
            str: Two-line string containing the cards, then the description
                with category strength and tiebreakers
        """
        cards_str = ", ".join(repr(card) for card in self.cards)
        eval_details = (
            f"[Rank: {self.category.strength}, Tiebreakers: {list(self.tiebreakers)}]"
        )
        return f"{cards_str}\n    - {self.description} {eval_details}"

    def get_state(self) -> HandState:
        """Get the current state of the hand."""
        return HandState(
            cards=[str(card) for card in self.cards],
            rank=self.category_name,
            rank_value=self.category.strength,
            tiebreakers=list(self.tiebreakers),
            description=self.description,
        )


def category_of(hand: Hand) -> HandRank:
    return hand.category


def category_name(hand: Hand) -> str:
    return hand.category_name


def compare(hand_a: Hand, hand_b: Hand) -> Comparison:
    """Compare two hands; the result is from hand_a's point of view."""
    result = hand_a.compare_to(hand_b)
    HandLogger.log_comparison(str(hand_a), str(hand_b), result)
    return result


def best_hand(hands: Iterable[Hand]) -> List[Hand]:
    """
    Find the strongest hand(s) among several five-card hands.

    Returns:
        List[Hand]: Every hand tied for best, in input order. Empty if no
            hands were given.
    """
    winners: List[Hand] = []
    for hand in hands:
        if not winners:
            winners.append(hand)
            continue
        result = hand.compare_to(winners[0])
        if result == Comparison.GREATER:
            winners = [hand]
        elif result == Comparison.EQUAL:
            winners.append(hand)
    return winners
