"""Constants for poker hand evaluation."""
from stud_poker.core.card import Suit

# Tie order for cards of equal rank inside a best hand
SUIT_ORDER = {
    Suit.HEARTS: 0,
    Suit.DIAMONDS: 1,
    Suit.SPADES: 2,
    Suit.CLUBS: 3,
}

# Cards in a scoring hand
HAND_SIZE = 5

# Cards required for a straight or a flush
STRAIGHT_LENGTH = 5
FLUSH_LENGTH = 5
