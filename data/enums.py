from enum import Enum


class Suit(str, Enum):
    """Card suits, keyed by their single-letter token."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def display_name(self) -> str:
        return self.name.title()


class Comparison(str, Enum):
    """Three-state result of comparing two hands."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
