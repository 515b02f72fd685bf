# src/stud_poker/evaluation/types.py
"""Common types for poker evaluation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from stud_poker.core.card import Card


class Classification(Enum):
    """
    Hand classifications, weakest first.

    Values are explicit ordinals; comparisons use them directly so
    a stronger hand always compares greater.
    """
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __lt__(self, other: 'Classification') -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: 'Classification') -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: 'Classification') -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: 'Classification') -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.value >= other.value

    @property
    def display_name(self) -> str:
        """Name as shown to players, e.g. 'Three of a Kind'."""
        if self is Classification.THREE_OF_KIND:
            return "Three of a Kind"
        if self is Classification.FOUR_OF_KIND:
            return "Four of a Kind"
        return self.name.replace('_', ' ').title()

    def __str__(self) -> str:
        return self.display_name


@dataclass
class HandResult:
    """
    Result of hand evaluation.

    Attributes:
        classification: Category of the hand
        cards_used: Best five cards, ordered for tie-breaking
        description: Human-readable description of hand
    """
    classification: Classification
    cards_used: List[Card] = field(default_factory=list)
    description: Optional[str] = None
