"""Tests for hand classification and best hand selection."""
import logging
import sys

import pytest
from stud_poker.core.card import Card, Rank, Suit, cards_from_string
from stud_poker.evaluation.evaluator import best_hand, classify
from stud_poker.evaluation.types import Classification


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for all tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


def strs(cards):
    return [str(c) for c in cards]


def test_classification_order():
    """Classifications compare by hand strength."""
    assert Classification.ROYAL_FLUSH > Classification.STRAIGHT
    assert Classification.HIGH_CARD < Classification.ONE_PAIR
    assert Classification.FLUSH == Classification.FLUSH
    assert sorted(Classification, reverse=True)[0] is Classification.ROYAL_FLUSH
    assert list(Classification) == sorted(Classification)


def test_classification_display_names():
    assert Classification.THREE_OF_KIND.display_name == "Three of a Kind"
    assert Classification.FOUR_OF_KIND.display_name == "Four of a Kind"
    assert Classification.ONE_PAIR.display_name == "One Pair"
    assert str(Classification.ROYAL_FLUSH) == "Royal Flush"


@pytest.mark.parametrize("hand_str,expected", [
    ("AhKh2dQh7sJhTh", Classification.ROYAL_FLUSH),
    ("9hKh2dQh7sJhTh", Classification.STRAIGHT_FLUSH),
    ("Ah3h2hQd5hJs4h", Classification.STRAIGHT_FLUSH),
    ("9h2d9s9d2h9c2c", Classification.FOUR_OF_KIND),
    ("9h2d9s9d2h3c2c", Classification.FULL_HOUSE),
    ("3h2d9s9d2h3c2c", Classification.FULL_HOUSE),
    ("9hKh2d2h7sJhTh", Classification.FLUSH),
    ("9dKc2dQh7sJhTh", Classification.STRAIGHT),
    ("4dAc2dQh5sJh3h", Classification.STRAIGHT),
    ("9h7d3s9d2h9c5c", Classification.THREE_OF_KIND),
    ("9h2d9s8d2h6c4c", Classification.TWO_PAIR),
    ("Ah2d9s8d2h6c4c", Classification.ONE_PAIR),
    ("AhJd9s8d2h6c4c", Classification.HIGH_CARD),
])
def test_classify(hand_str, expected):
    assert classify(cards_from_string(hand_str)) is expected


def test_royal_flush():
    hand = cards_from_string("AhKh2dQh7sJhTh")
    assert strs(best_hand(hand, Classification.ROYAL_FLUSH)) == ["Ah", "Kh", "Qh", "Jh", "Th"]


def test_royal_flush_five_cards():
    hand = cards_from_string("ThJhQhKhAh")
    assert classify(hand) is Classification.ROYAL_FLUSH


def test_king_high_straight_flush_is_not_royal():
    hand = cards_from_string("9hThJhQhKh")
    assert classify(hand) is Classification.STRAIGHT_FLUSH


def test_straight_flush():
    high_straight = cards_from_string("9hKh2dQh7sJhTh")
    assert strs(best_hand(high_straight, Classification.STRAIGHT_FLUSH)) == [
        "Kh", "Qh", "Jh", "Th", "9h"
    ]


def test_steel_wheel():
    """A five-high straight flush ends with the low ace."""
    low_straight = cards_from_string("Ah3h2hQd5hJs4h")
    best = best_hand(low_straight, Classification.STRAIGHT_FLUSH)
    assert strs(best) == ["5h", "4h", "3h", "2h", "Ah"]
    assert best[-1].rank is Rank.ACE_LOW


def test_straight_flush_ignores_off_suit_straight():
    """A higher straight using off-suit cards doesn't replace the straight flush."""
    hand = cards_from_string("5h6h7h8h9hTdJc")
    assert classify(hand) is Classification.STRAIGHT_FLUSH
    assert strs(best_hand(hand, Classification.STRAIGHT_FLUSH)) == ["9h", "8h", "7h", "6h", "5h"]


def test_four_of_kind():
    hand = cards_from_string("9h2d9s9d2h9c2c")
    assert strs(best_hand(hand, Classification.FOUR_OF_KIND)) == ["9h", "9d", "9s", "9c", "2h"]


def test_four_of_kind_kicker_is_highest_remaining():
    hand = cards_from_string("7h7d7s7c2h2dKs")
    assert strs(best_hand(hand, Classification.FOUR_OF_KIND)) == ["7h", "7d", "7s", "7c", "Ks"]


def test_full_house():
    hand1 = cards_from_string("9h2d9s9d2h3c2c")
    hand2 = cards_from_string("3h2d9s9d2h3c2c")
    assert strs(best_hand(hand1, Classification.FULL_HOUSE)) == ["9h", "9d", "9s", "2h", "2d"]
    assert strs(best_hand(hand2, Classification.FULL_HOUSE)) == ["2h", "2d", "2c", "9d", "9s"]


def test_full_house_from_two_triples():
    """Two triples make a full house of the higher triple and a pair of the lower."""
    hand = cards_from_string("9h9d9s2h2d2cKs")
    assert classify(hand) is Classification.FULL_HOUSE
    best = best_hand(hand, Classification.FULL_HOUSE)
    assert len(best) == 5
    assert [c.rank for c in best] == [Rank.NINE] * 3 + [Rank.TWO] * 2


def test_full_house_picks_highest_pair():
    hand = cards_from_string("5h5d5sKhKd3c3s")
    assert strs(best_hand(hand, Classification.FULL_HOUSE)) == ["5h", "5d", "5s", "Kh", "Kd"]


def test_flush():
    hand = cards_from_string("9hKh2d2h7sJhTh")
    assert strs(best_hand(hand, Classification.FLUSH)) == ["Kh", "Jh", "Th", "9h", "2h"]


def test_flush_takes_top_five_of_suit():
    hand = cards_from_string("2s4s6s8sTsQsAd")
    assert classify(hand) is Classification.FLUSH
    assert strs(best_hand(hand, Classification.FLUSH)) == ["Qs", "Ts", "8s", "6s", "4s"]


def test_two_suits_of_four_is_not_a_flush():
    """Flush length is counted per suit, never across suits."""
    hand = cards_from_string("2h5h9hJh3s7sTsKs")
    assert classify(hand) is Classification.HIGH_CARD


def test_straight():
    high_straight = cards_from_string("9dKc2dQh7sJhTh")
    assert strs(best_hand(high_straight, Classification.STRAIGHT)) == [
        "Kc", "Qh", "Jh", "Th", "9d"
    ]


def test_wheel():
    low_straight = cards_from_string("4dAc2dQh5sJh3h")
    best = best_hand(low_straight, Classification.STRAIGHT)
    assert strs(best) == ["5s", "4d", "3h", "2d", "Ac"]
    assert [c.rank for c in best] == [Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE_LOW]


def test_wheel_five_cards():
    hand = [
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.TWO, Suit.CLUBS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.SPADES),
        Card(Rank.FIVE, Suit.HEARTS),
    ]
    assert classify(hand) is Classification.STRAIGHT
    best = best_hand(hand, Classification.STRAIGHT)
    assert [c.rank for c in best] == [Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE_LOW]
    # the hand itself is untouched
    assert hand[0].rank is Rank.ACE


def test_broadway_straight_keeps_high_ace():
    hand = cards_from_string("AcKdQhJsTh2c3d")
    best = best_hand(hand, Classification.STRAIGHT)
    assert strs(best) == ["Ac", "Kd", "Qh", "Js", "Th"]
    assert best[0].rank is Rank.ACE


def test_straight_prefers_highest_run():
    hand = cards_from_string("Ac2d3h4s5c6d9h")
    assert classify(hand) is Classification.STRAIGHT
    assert strs(best_hand(hand, Classification.STRAIGHT)) == ["6d", "5c", "4s", "3h", "2d"]


def test_straight_with_paired_rank():
    """Duplicate ranks collapse before looking for a run."""
    hand = cards_from_string("5h6d6c7s8h9dKc")
    assert classify(hand) is Classification.STRAIGHT
    assert strs(best_hand(hand, Classification.STRAIGHT)) == ["9d", "8h", "7s", "6d", "5h"]


def test_gap_is_not_a_straight():
    hand = cards_from_string("2h3d4s5c7hJdKs")
    assert classify(hand) is Classification.HIGH_CARD


def test_no_wraparound_straight():
    hand = cards_from_string("QhKdAs2c3h8d7s")
    assert classify(hand) is Classification.HIGH_CARD


def test_three_of_kind():
    hand = cards_from_string("9h7d3s9d2h9c5c")
    assert strs(best_hand(hand, Classification.THREE_OF_KIND)) == ["9h", "9d", "9c", "7d", "5c"]


def test_two_pair():
    hand = cards_from_string("9h2d9s8d2h6c4c")
    assert strs(best_hand(hand, Classification.TWO_PAIR)) == ["9h", "9s", "2h", "2d", "8d"]


def test_two_pair_from_three_pairs():
    """With three pairs, the lowest pair can supply the kicker."""
    hand = cards_from_string("KhKd8s8c4h4d2s")
    assert classify(hand) is Classification.TWO_PAIR
    assert strs(best_hand(hand, Classification.TWO_PAIR)) == ["Kh", "Kd", "8s", "8c", "4h"]


def test_one_pair():
    hand = cards_from_string("Ah2d9s8d2h6c4c")
    assert strs(best_hand(hand, Classification.ONE_PAIR)) == ["2h", "2d", "Ah", "9s", "8d"]


def test_high_card():
    hand = cards_from_string("AhJd9s8d2h6c4c")
    assert strs(best_hand(hand, Classification.HIGH_CARD)) == ["Ah", "Jd", "9s", "8d", "6c"]


@pytest.mark.parametrize("hand_str,expected", [
    ("", Classification.HIGH_CARD),
    ("Ah", Classification.HIGH_CARD),
    ("AhAd", Classification.ONE_PAIR),
    ("AhAdAs", Classification.THREE_OF_KIND),
    ("AhAdKsKc", Classification.TWO_PAIR),
    ("2h3h4h5h", Classification.HIGH_CARD),
    ("9h9d9s9c", Classification.FOUR_OF_KIND),
])
def test_short_hands(hand_str, expected):
    """Hands under five cards still classify, without straights or flushes."""
    assert classify(cards_from_string(hand_str)) is expected


def test_short_hand_best_hand_length():
    hand = cards_from_string("9h9d9s9c")
    assert strs(best_hand(hand, Classification.FOUR_OF_KIND)) == ["9h", "9d", "9s", "9c"]
    hand = cards_from_string("AhAdKsKc")
    assert len(best_hand(hand, Classification.TWO_PAIR)) == 4


def test_best_hand_does_not_modify_input():
    hand = cards_from_string("4dAc2dQh5sJh3h")
    before = strs(hand)
    best_hand(hand, classify(hand))
    assert strs(hand) == before


def test_best_hand_accepts_any_iterable():
    hand = cards_from_string("9h2d9s8d2h6c4c")
    assert classify(iter(hand)) is Classification.TWO_PAIR
    assert strs(best_hand(tuple(hand), Classification.TWO_PAIR)) == ["9h", "9s", "2h", "2d", "8d"]
