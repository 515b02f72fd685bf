from typing import Dict, List

from stud_poker.core.card import Card, Rank
from stud_poker.evaluation.evaluator import best_hand, classify
from stud_poker.evaluation.types import Classification


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def describe_hand(self, cards: List[Card]) -> str:
        """Get a basic description of the hand, e.g. 'Full House'."""
        return classify(cards).display_name

    def describe_hand_detailed(self, cards: List[Card]) -> str:
        """Get a detailed description of the hand, e.g. 'Full House, Nines over Twos'."""
        classification = classify(cards)
        return self.describe_best_hand(classification, best_hand(cards, classification))

    def describe_best_hand(self, classification: Classification, cards: List[Card]) -> str:
        """
        Describe an already selected best hand.

        Args:
            classification: Classification of the hand
            cards: Best hand as returned by best_hand, in tie-break order
        """
        if not cards:
            return classification.display_name

        if classification is Classification.HIGH_CARD:
            return f"{cards[0].rank.full_name} High"
        elif classification is Classification.ONE_PAIR:
            return f"Pair of {cards[0].rank.plural_name}"
        elif classification is Classification.TWO_PAIR:
            return self._describe_two_pair(cards)
        elif classification is Classification.THREE_OF_KIND:
            return f"Three {cards[0].rank.plural_name}"
        elif classification is Classification.STRAIGHT:
            return f"{cards[0].rank.full_name}-high Straight"
        elif classification is Classification.FLUSH:
            return f"{cards[0].rank.full_name}-high Flush"
        elif classification is Classification.FULL_HOUSE:
            return self._describe_full_house(cards)
        elif classification is Classification.FOUR_OF_KIND:
            return f"Four {cards[0].rank.plural_name}"
        elif classification is Classification.STRAIGHT_FLUSH:
            return f"{cards[0].rank.full_name}-high Straight Flush"
        return classification.display_name

    def _rank_counts(self, cards: List[Card]) -> Dict[Rank, int]:
        rank_counts: Dict[Rank, int] = {}
        for card in cards:
            rank_counts[card.rank] = rank_counts.get(card.rank, 0) + 1
        return rank_counts

    def _describe_two_pair(self, cards: List[Card]) -> str:
        """Generate detailed description for Two Pair."""
        rank_counts = self._rank_counts(cards)
        pairs = sorted(
            (rank for rank, count in rank_counts.items() if count == 2),
            reverse=True
        )
        if len(pairs) == 2:
            return f"Two Pair, {pairs[0].plural_name} and {pairs[1].plural_name}"
        return "Two Pair"

    def _describe_full_house(self, cards: List[Card]) -> str:
        """Generate detailed description for Full House."""
        rank_counts = self._rank_counts(cards)

        trips_rank = None
        pair_rank = None
        for rank, count in rank_counts.items():
            if count == 3:
                trips_rank = rank
            elif count == 2:
                pair_rank = rank

        if trips_rank and pair_rank:
            return f"Full House, {trips_rank.plural_name} over {pair_rank.plural_name}"
        return "Full House"
