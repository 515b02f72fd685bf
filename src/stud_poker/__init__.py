"""Poker hand evaluation and heads-up stud showdowns."""

from stud_poker.core.card import Card, Rank, Suit
from stud_poker.core.deck import Deck
from stud_poker.evaluation.evaluator import best_hand, classify, compare_hands, evaluate_hand
from stud_poker.evaluation.types import Classification, HandResult

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "Classification",
    "HandResult",
    "classify",
    "best_hand",
    "evaluate_hand",
    "compare_hands",
]
