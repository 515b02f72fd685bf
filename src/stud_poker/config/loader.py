"""Game configuration loading and parsing."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import json

import jsonschema

import logging
logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parents[3] / 'data'
SCHEMA_PATH = DATA_DIR / 'schemas' / 'game.json'
DEFAULT_CONFIG_PATH = DATA_DIR / 'game_configs' / 'seven_card_stud.json'

_schema_cache: Dict[str, Any] = {}


def load_schema() -> Dict[str, Any]:
    """Load the JSON schema for game configurations."""
    if 'game' not in _schema_cache:
        with open(SCHEMA_PATH) as f:
            _schema_cache['game'] = json.load(f)
    return _schema_cache['game']


@dataclass
class GameConfig:
    """
    Settings for a showdown game.

    Attributes:
        game: Display name of the game
        players: Seat names; the first seat is the human player
        cards_per_hand: Cards dealt to each seat (5 to 7)
        seed: Seed for the shuffle, None for a random game
        log_level: Logging level name for the terminal interface
    """
    game: str = "Seven Card Stud"
    players: List[str] = field(default_factory=lambda: ["Player", "Computer"])
    cards_per_hand: int = 7
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameConfig':
        """
        Create a config from parsed JSON data.

        Raises:
            ValueError: If the data does not match the schema
        """
        try:
            jsonschema.validate(instance=data, schema=load_schema())
        except jsonschema.exceptions.ValidationError as e:
            raise ValueError(f"Invalid game configuration: {e.message}") from e

        defaults = cls()
        return cls(
            game=data['game'],
            players=list(data.get('players', defaults.players)),
            cards_per_hand=data.get('cardsPerHand', defaults.cards_per_hand),
            seed=data.get('seed'),
            log_level=data.get('logLevel', defaults.log_level),
        )

    @classmethod
    def from_json(cls, json_str: str) -> 'GameConfig':
        """
        Create a config from a JSON string.

        Raises:
            ValueError: If the JSON is malformed or invalid
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in game configuration: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> 'GameConfig':
        """Load a config from a JSON file."""
        filepath = Path(filepath)
        logger.info(f"Loading game configuration from {filepath}")
        try:
            with open(filepath) as f:
                return cls.from_json(f.read())
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load configuration from {filepath}: {e}")
            raise

    def to_json(self) -> Dict[str, Any]:
        """Convert to the JSON layout read by from_dict."""
        return {
            'game': self.game,
            'players': list(self.players),
            'cardsPerHand': self.cards_per_hand,
            'seed': self.seed,
            'logLevel': self.log_level,
        }
