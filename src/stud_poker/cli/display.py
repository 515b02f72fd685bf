from typing import List

from stud_poker.core.card import Card
from stud_poker.game.game import Game
from stud_poker.game.game_result import GameResult


def format_cards(cards: List[Card]) -> str:
    return " ".join(str(card) for card in cards)


def display_hands(game: Game) -> None:
    """Show every card dealt to each seat."""
    print(f"\n=== {game.config.game} ===")
    for pid, cards in game.hands.items():
        print(f"{pid + ':':<10} {format_cards(cards)}")


def outcome_message(result: GameResult, player_id: str) -> str:
    """Result line from the point of view of the human seat."""
    if result.is_tie:
        return "It's a Tie!"
    if result.winner == player_id:
        return "You Win!"
    return "You Lose!"


def display_showdown(result: GameResult, player_id: str) -> None:
    """Show each seat's classification and best hand, then the outcome."""
    print("\n=== Showdown ===")
    for pid, hand in result.hands.items():
        print(f"{pid + ':':<10} {hand.classification.display_name}")
        print(f"\t{format_cards(hand.best_hand)}  ({hand.hand_description})")
    print(outcome_message(result, player_id))
