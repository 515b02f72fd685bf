"""Main poker hand evaluation interface.

Two operations make up the evaluator:

* ``classify`` decides what kind of hand a collection of cards holds.
* ``best_hand`` picks the five cards that represent that hand, ordered
  so two hands of the same classification can be compared card by card.

Both are pure functions of their input; nothing is cached between calls.
"""
from collections import Counter
from typing import Dict, Iterable, List, Optional
import logging

from stud_poker.core.card import Card, Rank, Suit
from stud_poker.evaluation.constants import (
    FLUSH_LENGTH, HAND_SIZE, STRAIGHT_LENGTH, SUIT_ORDER
)
from stud_poker.evaluation.types import Classification, HandResult

logger = logging.getLogger(__name__)

# Cards making up the defining group for grouped classifications
GROUP_SIZES = {
    Classification.ONE_PAIR: 2,
    Classification.TWO_PAIR: 4,
    Classification.THREE_OF_KIND: 3,
    Classification.FOUR_OF_KIND: 4,
}


def _by_rank(cards: Iterable[Card]) -> List[Card]:
    """Sort highest rank first, equal ranks in suit order."""
    return sorted(cards, key=lambda c: (-c.rank.value, SUIT_ORDER[c.suit]))


def _rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    return Counter(card.rank for card in cards)


def _majority_suit(cards: List[Card]) -> Optional[Suit]:
    """
    Suit holding the most cards, counted per suit.

    Ties go to the earlier suit in SUIT_ORDER; a tie can only occur
    below flush length, where the choice doesn't matter.
    """
    suit_counts = Counter(card.suit for card in cards)
    if not suit_counts:
        return None
    return max(suit_counts, key=lambda s: (suit_counts[s], -SUIT_ORDER[s]))


def _flush_cards(cards: List[Card]) -> List[Card]:
    """Cards of the majority suit, or an empty list if there is no flush."""
    suit = _majority_suit(cards)
    flush = [card for card in cards if card.suit == suit]
    if len(flush) < FLUSH_LENGTH:
        return []
    return flush


def _straight_high(ranks: Iterable[Rank]) -> Optional[int]:
    """
    Top value of the highest straight among the given ranks.

    An ace also counts as value 1 here so the wheel is found. Returns
    None when there is no straight.
    """
    values = {rank.value for rank in ranks}
    if Rank.ACE.value in values:
        values.add(Rank.ACE_LOW.value)
    ordered = sorted(values, reverse=True)
    for i in range(len(ordered) - STRAIGHT_LENGTH + 1):
        if ordered[i] - ordered[i + STRAIGHT_LENGTH - 1] == STRAIGHT_LENGTH - 1:
            return ordered[i]
    return None


def _straight_run(cards: List[Card]) -> List[Card]:
    """
    Highest five-card run, top card first.

    One card is kept per rank (earliest in suit order). An ace at the top
    is copied to the bottom as ACE_LOW; the copy only survives when the
    wheel is the run returned, so the result never holds two aces.
    """
    distinct: Dict[Rank, Card] = {}
    for card in sorted(cards, key=lambda c: SUIT_ORDER[c.suit]):
        distinct.setdefault(card.rank, card)

    run = _by_rank(distinct.values())
    if run and run[0].rank is Rank.ACE:
        run.append(Card(Rank.ACE_LOW, run[0].suit))

    for i in range(len(run) - STRAIGHT_LENGTH + 1):
        window = run[i:i + STRAIGHT_LENGTH]
        if window[0].rank.value - window[-1].rank.value == STRAIGHT_LENGTH - 1:
            return window
    return []


def _grouped_classification(cards: List[Card]) -> Classification:
    """Classify by how many ranks appear four, three and two times."""
    counts = Counter(_rank_counts(cards).values())

    if counts[4] >= 1:
        return Classification.FOUR_OF_KIND
    if counts[3] >= 1:
        # a second triple supplies the pair
        if counts[3] > 1 or counts[2] >= 1:
            return Classification.FULL_HOUSE
        return Classification.THREE_OF_KIND
    if counts[2] >= 2:
        return Classification.TWO_PAIR
    if counts[2] == 1:
        return Classification.ONE_PAIR
    return Classification.HIGH_CARD


def classify(hand: Iterable[Card]) -> Classification:
    """
    Classify a hand of any size.

    Intended for 5 to 7 cards. Smaller hands get the best grouped
    classification they hold, since no straight or flush fits.

    Args:
        hand: Cards to classify, in any order

    Returns:
        The hand's classification
    """
    cards = list(hand)

    flush = _flush_cards(cards)
    if flush:
        high = _straight_high(card.rank for card in flush)
        if high is None:
            classification = Classification.FLUSH
        elif high == Rank.ACE.value:
            classification = Classification.ROYAL_FLUSH
        else:
            classification = Classification.STRAIGHT_FLUSH
    elif _straight_high(card.rank for card in cards) is not None:
        classification = Classification.STRAIGHT
    else:
        classification = _grouped_classification(cards)

    logger.debug(f"Classified {[str(c) for c in cards]} as {classification}")
    return classification


def _best_full_house(cards: List[Card]) -> List[Card]:
    """Highest triple, then two cards of the highest other paired rank."""
    rank_counts = _rank_counts(cards)
    ranked = sorted(rank_counts, key=lambda r: r.value, reverse=True)

    trips_rank = next((r for r in ranked if rank_counts[r] >= 3), None)
    if trips_rank is None:
        return _by_rank(cards)[:HAND_SIZE]
    pair_rank = next(
        (r for r in ranked if r is not trips_rank and rank_counts[r] >= 2), None
    )

    ordered = _by_rank(cards)
    best = [c for c in ordered if c.rank is trips_rank][:3]
    best += [c for c in ordered if c.rank is pair_rank][:2]
    return best


def best_hand(hand: Iterable[Card], classification: Classification) -> List[Card]:
    """
    Select the cards that represent a hand, in tie-break order.

    The classification must be the one ``classify`` returned for this
    same hand. A mismatched classification is not detected; the result
    is whatever the selection rule for that classification yields.

    Args:
        hand: Cards to select from, in any order
        classification: The hand's classification

    Returns:
        Up to five cards, defining group first, strongest first within
        each part. A wheel ends with an ACE_LOW card.
    """
    cards = list(hand)

    if classification in (Classification.STRAIGHT_FLUSH, Classification.STRAIGHT):
        if classification is Classification.STRAIGHT_FLUSH:
            cards = _flush_cards(cards)
        best = _straight_run(cards)

    elif classification in (Classification.FLUSH, Classification.ROYAL_FLUSH):
        best = _by_rank(_flush_cards(cards))[:HAND_SIZE]

    elif classification is Classification.FULL_HOUSE:
        best = _best_full_house(cards)

    elif classification in GROUP_SIZES:
        group_size = GROUP_SIZES[classification]
        rank_counts = _rank_counts(cards)
        ordered = sorted(
            cards,
            key=lambda c: (-rank_counts[c.rank], -c.rank.value, SUIT_ORDER[c.suit])
        )
        kickers = _by_rank(ordered[group_size:])
        best = ordered[:group_size] + kickers[:HAND_SIZE - group_size]

    else:
        best = _by_rank(cards)[:HAND_SIZE]

    logger.debug(f"Best {classification} hand: {[str(c) for c in best]}")
    return best


def evaluate_hand(hand: Iterable[Card]) -> HandResult:
    """
    Classify a hand and pick its best cards in one step.

    Returns:
        HandResult with classification, best cards and a detailed description
    """
    from stud_poker.evaluation.hand_description import HandDescriber

    cards = list(hand)
    classification = classify(cards)
    best = best_hand(cards, classification)
    return HandResult(
        classification=classification,
        cards_used=best,
        description=HandDescriber().describe_best_hand(classification, best),
    )


def compare_hands(result1: HandResult, result2: HandResult) -> int:
    """
    Compare two evaluated hands.

    The higher classification wins. Equal classifications are decided by
    the first position where one best hand's card outranks the other's.

    Returns:
        1 if result1 wins, -1 if result2 wins, 0 if tie
    """
    if result1.classification != result2.classification:
        return 1 if result1.classification > result2.classification else -1

    for card1, card2 in zip(result1.cards_used, result2.cards_used):
        if card1 > card2:
            return 1
        if card1 < card2:
            return -1
    return 0
