"""
Data models for game management.

These represent game-specific data structures that operate within lobbies.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any
from enum import Enum
from utils.constants import GAME_CONFIG, GAME_PHASES
from utils.helpers import placeholder_indices, fill_prompt


class GamePhase(Enum):
    """Round phase enumeration."""
    PLAYING = GAME_PHASES['PLAYING']
    JUDGING = GAME_PHASES['JUDGING']
    RESULTS = GAME_PHASES['RESULTS']
    GAME_OVER = GAME_PHASES['GAME_OVER']


@dataclass(frozen=True)
class PromptTemplate:
    """A prompt with {0}..{k-1} placeholders, filled by `blanks` cards."""
    text: str
    blanks: int

    @property
    def is_valid(self) -> bool:
        """Blanks must be in range and match the distinct placeholders in the text."""
        if not GAME_CONFIG['MIN_BLANKS'] <= self.blanks <= GAME_CONFIG['MAX_BLANKS']:
            return False
        return placeholder_indices(self.text) == list(range(self.blanks))

    def fill(self, cards: List[str]) -> str:
        """Render the prompt with the given cards in placeholder order."""
        return fill_prompt(self.text, cards)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'text': self.text,
            'blanks': self.blanks
        }


@dataclass
class GamePlayer:
    """A participant in the fixed player snapshot taken at game start."""
    player_id: str
    name: str
    score: int = 0
    connected: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.player_id,
            'name': self.name,
            'score': self.score,
            'connected': self.connected
        }


@dataclass
class Submission:
    """A finalized card combination from one non-judge player."""
    player_id: str
    cards: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'playerId': self.player_id,
            'cards': list(self.cards)
        }
