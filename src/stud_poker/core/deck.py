"""Deck implementation."""
from typing import List, Optional
import random

from .card import Card, Rank, Suit

DEALT_RANKS = [r for r in Rank if r is not Rank.ACE_LOW]


class Deck:
    """
    A standard 52-card deck.

    Attributes:
        cards: List of cards in the deck, top of deck last
    """

    def __init__(self):
        """Initialize a new, unshuffled deck."""
        self.cards: List[Card] = []
        self._initialize_deck()

    def _initialize_deck(self) -> None:
        """Create a fresh deck of cards."""
        for suit in Suit:
            for rank in DEALT_RANKS:
                self.cards.append(Card(rank=rank, suit=suit))

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """
        Shuffle the deck.

        Args:
            rng: Random source to shuffle with; module-level random if omitted
        """
        (rng or random).shuffle(self.cards)

    def deal_card(self) -> Optional[Card]:
        """
        Deal a single card from the top of the deck.

        Returns:
            Card or None if deck is empty
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal multiple cards from the top of the deck.

        Returns:
            List of cards (may be fewer than requested if deck runs out)
        """
        cards = []
        for _ in range(count):
            card = self.deal_card()
            if card is None:
                break
            cards.append(card)
        return cards

    def remove_card(self, card: Card) -> Card:
        """
        Remove a specific card from the deck.
        Matches on rank and suit.

        Raises:
            ValueError: If card not in deck
        """
        # list.remove would match on rank alone
        for i, deck_card in enumerate(self.cards):
            if deck_card.same_card(card):
                return self.cards.pop(i)
        raise ValueError(f"Card {card} not in deck")

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
