from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class HandState:
    """Represents the state of an evaluated poker hand."""

    cards: List[str]  # Card tokens in hand order (e.g., "AS")
    rank: Optional[str] = None  # Category display name
    rank_value: Optional[int] = None  # Category strength, 0 (high card) to 8
    tiebreakers: List[int] = field(default_factory=list)
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert hand state to dictionary representation."""
        return {
            "cards": list(self.cards),
            "evaluation": {
                "rank": self.rank,
                "rank_value": self.rank_value,
                "tiebreakers": list(self.tiebreakers),
                "description": self.description,
            },
        }
