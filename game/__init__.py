"""
Game Module for Trump Against Humanity.

Contains all game-specific logic and components.
Game operations happen within lobbies but are separate from lobby management.
"""

from .models import GamePhase, GamePlayer, PromptTemplate, Submission
from .deck import Deck, InsufficientCards
from .round_engine import RoundEngine
from .manager import GameManager
from .phase_timer import PhaseTimer

__all__ = [
    # Data models
    'GamePhase',
    'GamePlayer',
    'PromptTemplate',
    'Submission',

    # Cards
    'Deck',
    'InsufficientCards',

    # Game flow
    'RoundEngine',
    'GameManager',
    'PhaseTimer'
]
