from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from stud_poker.core.card import Card
from stud_poker.evaluation.types import Classification


@dataclass
class HandResult:
    """Information about a seat's hand and its evaluation."""

    player_id: str
    cards: List[Card]  # All cards dealt to the seat
    classification: Classification
    best_hand: List[Card]  # Best five cards, in tie-break order
    hand_description: str  # e.g., "Full House, Nines over Twos"

    def __str__(self) -> str:
        """String representation of the hand result."""
        cards_str = ", ".join(str(card) for card in self.best_hand)
        return f"{self.player_id}: {self.hand_description} ({cards_str})"

    def to_json(self) -> Dict[str, Any]:
        """Convert to JSON-compatible dictionary."""
        return {
            "player_id": self.player_id,
            "cards": [str(card) for card in self.cards],
            "classification": self.classification.display_name,
            "best_hand": [str(card) for card in self.best_hand],
            "hand_description": self.hand_description,
        }


@dataclass
class GameResult:
    """Outcome of a showdown between two seats."""

    hands: Dict[str, HandResult] = field(default_factory=dict)
    winner: Optional[str] = None  # Seat that won, None for a tie

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        lines = [str(hand) for hand in self.hands.values()]
        if self.is_tie:
            lines.append("Tie")
        else:
            lines.append(f"Winner: {self.winner}")
        return "\n".join(lines)

    def to_json(self) -> Dict[str, Any]:
        """Convert to JSON-compatible dictionary."""
        return {
            "hands": {pid: hand.to_json() for pid, hand in self.hands.items()},
            "winner": self.winner,
            "is_tie": self.is_tie,
        }
