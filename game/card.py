from typing import Dict

from data.enums import Suit
from exceptions import InvalidRankError, InvalidSuitError, MalformedTokenError

# Rank characters to numeric values (T=10, J=11, Q=12, K=13, A=14)
RANK_VALUES: Dict[str, int] = {
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "T": 10,
    "J": 11,
    "Q": 12,
    "K": 13,
    "A": 14,
}

RANK_SYMBOLS: Dict[int, str] = {value: symbol for symbol, value in RANK_VALUES.items()}

RANK_NAMES: Dict[int, str] = {
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
    10: "Ten",
    11: "Jack",
    12: "Queen",
    13: "King",
    14: "Ace",
}


class Card:
    """
    Represents a single playing card with rank and suit.

    A card is immutable after creation. Two cards are equal when both rank
    and suit match; str() gives the two-character token it was parsed from,
    normalized to uppercase.

    Attributes:
        rank (int): The card's rank value (2-14, where 11=J, 12=Q, 13=K, 14=A)
        suit (Suit): The card's suit
    """

    __slots__ = ("rank", "suit")

    def __init__(self, rank: int, suit: Suit):
        """
        Initialize a new card with specified rank and suit.

        Args:
            rank (int): The card's rank value, 2 through 14
            suit (Suit): The card's suit

        Raises:
            ValueError: If rank is outside 2-14 or suit is not a Suit
        """
        if rank not in RANK_SYMBOLS:
            raise ValueError(f"Card rank must be between 2 and 14, got {rank!r}")
        if not isinstance(suit, Suit):
            raise ValueError(f"Card suit must be a Suit, got {suit!r}")
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", suit)

    @classmethod
    def from_token(cls, token: str) -> "Card":
        """
        Parse a two-character token such as "TH" or "as" into a Card.

        Raises:
            MalformedTokenError: If the token is not exactly two characters
            InvalidRankError: If the first character is not a rank symbol
            InvalidSuitError: If the second character is not C, D, H or S
        """
        if len(token) != 2:
            raise MalformedTokenError(token)

        rank = RANK_VALUES.get(token[0].upper())
        if rank is None:
            raise InvalidRankError(token)

        try:
            suit = Suit(token[1].upper())
        except ValueError:
            raise InvalidSuitError(token) from None

        return cls(rank, suit)

    @property
    def rank_name(self) -> str:
        return RANK_NAMES[self.rank]

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{self.suit.value}"

    def __repr__(self) -> str:
        """
        Returns string representation of the card.

        Returns:
            str: Card in format "rank of suit"
        """
        return f"{self.rank_name} of {self.suit.display_name}"
