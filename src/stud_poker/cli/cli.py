"""Terminal play against the computer."""
from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from stud_poker.config.loader import DEFAULT_CONFIG_PATH, GameConfig
from stud_poker.game.game import Game
from stud_poker.game.game_result import GameResult
from .display import display_hands, display_showdown

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stud-poker",
        description="Play heads-up stud poker against the computer"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Game configuration JSON file"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Shuffle seed, overrides the configuration"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Number of rounds to play without prompting"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level, overrides the configuration"
    )
    return parser


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


def load_config(args: argparse.Namespace) -> GameConfig:
    """Read the configuration file and apply command line overrides."""
    config = GameConfig.from_file(args.config)
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def play_round(game: Game) -> GameResult:
    result = game.play_seven_card_stud()
    display_hands(game)
    display_showdown(result, game.config.players[0])
    return result


def ask_play_again() -> bool:
    choice = input("\nPlay again? [y/N]: ").strip().lower()
    return choice in ("y", "yes")


def run_game(game: Game, rounds: Optional[int] = None) -> List[GameResult]:
    """
    Play rounds until the player stops, or a fixed number of rounds.

    Returns:
        Results of every round played
    """
    results = []
    while True:
        results.append(play_round(game))
        if rounds is not None:
            if len(results) >= rounds:
                break
        elif not ask_play_again():
            break
    logger.info(f"Played {len(results)} round(s)")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        print(f"Error: could not load configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)
    run_game(Game(config), rounds=args.rounds)
    return 0
