from enum import Enum


class HandRank(Enum):
    """
    Poker hand categories from weakest (HIGH_CARD) to strongest (STRAIGHT_FLUSH).

    Each member carries its strength and display name explicitly. Members only
    compare against other HandRank members; ordering is by strength.
    """

    HIGH_CARD = (0, "High Card")
    ONE_PAIR = (1, "One Pair")
    TWO_PAIR = (2, "Two Pair")
    THREE_OF_KIND = (3, "Three of a Kind")
    STRAIGHT = (4, "Straight")
    FLUSH = (5, "Flush")
    FULL_HOUSE = (6, "Full House")
    FOUR_OF_KIND = (7, "Four of a Kind")
    STRAIGHT_FLUSH = (8, "Straight Flush")

    def __init__(self, strength: int, display_name: str):
        self.strength = strength
        self.display_name = display_name

    def __lt__(self, other):
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.strength < other.strength

    def __le__(self, other):
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.strength <= other.strength

    def __gt__(self, other):
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.strength > other.strength

    def __ge__(self, other):
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.strength >= other.strength

    def __str__(self):
        return self.display_name
