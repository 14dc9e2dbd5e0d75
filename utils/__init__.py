"""
Utilities module for Trump Against Humanity.

This module contains constants, helper functions, and utility classes
used throughout the application.
"""

from .constants import CARDS, PROMPTS, LOBBY_STATES, GAME_PHASES, GAME_CONFIG, ERROR_MESSAGES
from .helpers import generate_id, validate_display_name, validate_lobby_name, placeholder_indices, fill_prompt

__all__ = [
    'CARDS',
    'PROMPTS',
    'LOBBY_STATES',
    'GAME_PHASES',
    'GAME_CONFIG',
    'ERROR_MESSAGES',
    'generate_id',
    'validate_display_name',
    'validate_lobby_name',
    'placeholder_indices',
    'fill_prompt'
]
