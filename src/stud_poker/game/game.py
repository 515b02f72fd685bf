"""Heads-up stud showdown between two seats."""
from typing import Dict, List, Optional
import logging
import random

from stud_poker.config.loader import GameConfig
from stud_poker.core.card import Card
from stud_poker.core.deck import Deck
from stud_poker.evaluation.evaluator import compare_hands, evaluate_hand
from stud_poker.game.game_result import GameResult, HandResult

logger = logging.getLogger(__name__)


class Game:
    """
    Deals stud hands to two seats and settles the showdown.

    Attributes:
        config: Game settings
        deck: Deck for the current round
        hands: Cards dealt to each seat this round
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the game.

        Args:
            config: Game settings; defaults to seven card stud
            rng: Random source for shuffling; seeded from config.seed if omitted
        """
        self.config = config or GameConfig()
        if len(self.config.players) != 2:
            raise ValueError(f"Showdown needs exactly two players, got {len(self.config.players)}")
        self.rng = rng or random.Random(self.config.seed)
        self.deck = Deck()
        self.hands: Dict[str, List[Card]] = {pid: [] for pid in self.config.players}

    def play_seven_card_stud(self) -> GameResult:
        """Play one round: fresh deck, shuffle, deal, showdown."""
        logger.info(f"Starting {self.config.game}")
        self.deck = Deck()
        self.hands = {pid: [] for pid in self.config.players}
        self.deck.shuffle(self.rng)
        self.deal(self.config.cards_per_hand)
        return self.showdown(self.hands)

    def deal(self, count: int) -> None:
        """
        Deal cards one at a time to each seat in turn.

        Raises:
            ValueError: If the deck runs out
        """
        for _ in range(count):
            for pid in self.config.players:
                card = self.deck.deal_card()
                if card is None:
                    raise ValueError("Not enough cards left in deck to deal")
                self.hands[pid].append(card)
        for pid, cards in self.hands.items():
            logger.debug(f"Dealt {pid}: {[str(c) for c in cards]}")

    def showdown(self, hands: Dict[str, List[Card]]) -> GameResult:
        """
        Evaluate both hands and decide the winner.

        Args:
            hands: Cards held by each of the two seats

        Returns:
            GameResult with each seat's evaluation and the winner (None on a tie)
        """
        if len(hands) != 2:
            raise ValueError(f"Showdown needs exactly two hands, got {len(hands)}")

        results = {}
        evaluations = {}
        for pid, cards in hands.items():
            evaluation = evaluate_hand(cards)
            evaluations[pid] = evaluation
            results[pid] = HandResult(
                player_id=pid,
                cards=list(cards),
                classification=evaluation.classification,
                best_hand=evaluation.cards_used,
                hand_description=evaluation.description,
            )
            logger.info(f"{pid} has {evaluation.description}")

        first, second = hands
        outcome = compare_hands(evaluations[first], evaluations[second])
        if outcome > 0:
            winner = first
        elif outcome < 0:
            winner = second
        else:
            winner = None

        logger.info(f"Showdown winner: {winner or 'tie'}")
        return GameResult(hands=results, winner=winner)
