from typing import TYPE_CHECKING, List

from pydantic import BaseModel, Field

from data.enums import Comparison

if TYPE_CHECKING:
    from game.hand import Hand


class HandDTO(BaseModel):
    """Data Transfer Object for an evaluated hand.

    Carries the cards and the full evaluation so results can be emitted as JSON.
    """

    cards: List[str] = Field(..., description="Card tokens, highest rank first")
    category: str = Field(..., description="Category display name, e.g. 'Two Pair'")
    strength: int = Field(..., ge=0, le=8, description="Category strength, 0-8")
    tiebreakers: List[int] = Field(default_factory=list)
    description: str = Field(default="", description="Human readable summary")

    @classmethod
    def from_hand(cls, hand: "Hand") -> "HandDTO":
        state = hand.get_state()
        return cls(
            cards=state.cards,
            category=state.rank,
            strength=state.rank_value,
            tiebreakers=state.tiebreakers,
            description=state.description,
        )


class ComparisonDTO(BaseModel):
    """Data Transfer Object for the comparison of two hands."""

    first: HandDTO
    second: HandDTO
    result: Comparison = Field(..., description="Result from the first hand's side")
    winner: str = Field(..., description="'first', 'second' or 'tie'")

    @classmethod
    def from_hands(
        cls, first: "Hand", second: "Hand", result: Comparison
    ) -> "ComparisonDTO":
        winner = {
            Comparison.GREATER: "first",
            Comparison.LESS: "second",
            Comparison.EQUAL: "tie",
        }[result]
        return cls(
            first=HandDTO.from_hand(first),
            second=HandDTO.from_hand(second),
            result=result,
            winner=winner,
        )
