"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List


class Suit(Enum):
    """Card suits."""
    HEARTS = 'h'
    DIAMONDS = 'd'
    SPADES = 's'
    CLUBS = 'c'

    def __str__(self) -> str:
        return self.value


_RANK_NAMES = {
    1: ('A', 'Ace', 'Aces'),
    2: ('2', 'Two', 'Twos'),
    3: ('3', 'Three', 'Threes'),
    4: ('4', 'Four', 'Fours'),
    5: ('5', 'Five', 'Fives'),
    6: ('6', 'Six', 'Sixes'),
    7: ('7', 'Seven', 'Sevens'),
    8: ('8', 'Eight', 'Eights'),
    9: ('9', 'Nine', 'Nines'),
    10: ('T', 'Ten', 'Tens'),
    11: ('J', 'Jack', 'Jacks'),
    12: ('Q', 'Queen', 'Queens'),
    13: ('K', 'King', 'Kings'),
    14: ('A', 'Ace', 'Aces'),
}


class Rank(Enum):
    """
    Card ranks, valued by strength.

    ACE is the high ace. ACE_LOW only exists while building a
    wheel (A-2-3-4-5); it is never dealt and never equals ACE.
    """
    ACE_LOW = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __lt__(self, other: 'Rank') -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: 'Rank') -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: 'Rank') -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: 'Rank') -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value >= other.value

    @property
    def symbol(self) -> str:
        return _RANK_NAMES[self.value][0]

    @property
    def full_name(self) -> str:
        return _RANK_NAMES[self.value][1]

    @property
    def plural_name(self) -> str:
        return _RANK_NAMES[self.value][2]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Rank':
        """Look up a dealt rank by symbol; 'A' is always the high ace."""
        symbol = symbol.upper()
        for rank in cls:
            if rank is not cls.ACE_LOW and rank.symbol == symbol:
                return rank
        raise ValueError(f"Invalid rank symbol: {symbol}")

    def __str__(self) -> str:
        return self.symbol


@total_ordering
@dataclass(frozen=True, eq=False)
class Card:
    """
    Represents a playing card.

    Cards order and compare by rank alone; two cards of the same rank
    in different suits are equal. Use ``same_card`` to tell physical
    cards apart.

    Attributes:
        rank: Card rank
        suit: Card suit
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __eq__(self, other: object) -> bool:
        """Cards are equal if ranks match; suit is ignored."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank

    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __hash__(self) -> int:
        return hash(self.rank)

    def same_card(self, other: 'Card') -> bool:
        """True if both rank and suit match."""
        return self.rank == other.rank and self.suit == other.suit

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = Rank.from_symbol(rank_str)
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except (ValueError, StopIteration):
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)


def cards_from_string(hand_str: str) -> List[Card]:
    """
    Parse a string of concatenated cards, e.g. "AsKd7c".

    Raises:
        ValueError: If the string length is odd or any card is invalid
    """
    if len(hand_str) % 2 != 0:
        raise ValueError(f"Invalid hand string length: {hand_str} (must be multiple of 2)")

    cards = []
    for i in range(0, len(hand_str), 2):
        try:
            cards.append(Card.from_string(hand_str[i:i + 2]))
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i // 2 + 1} in hand string '{hand_str}': {e}")
    return cards
