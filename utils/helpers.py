"""
Helper utilities for Trump Against Humanity.

This module contains utility functions used throughout the application
for validation, id generation, and prompt text handling.
"""

import re
import uuid
from typing import List, Optional, Tuple
from .constants import GAME_CONFIG

PLACEHOLDER_PATTERN = re.compile(r'\{(\d+)\}')


def generate_id() -> str:
    """Generate an opaque unique identifier for players and lobbies."""
    return str(uuid.uuid4())


def validate_display_name(name: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a player's display name.

    Names do not need to be unique across players.

    Returns:
        tuple: (is_valid, error_message)
    """
    if not name or not name.strip():
        return False, "Name cannot be empty"

    if len(name.strip()) > GAME_CONFIG['NAME_MAX_LENGTH']:
        return False, f"Name must be {GAME_CONFIG['NAME_MAX_LENGTH']} characters or less"

    return True, None


def validate_lobby_name(name: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a lobby name.

    Returns:
        tuple: (is_valid, error_message)
    """
    if not name or not name.strip():
        return False, "Lobby name cannot be empty"

    if len(name.strip()) > GAME_CONFIG['LOBBY_NAME_MAX_LENGTH']:
        return False, f"Lobby name must be {GAME_CONFIG['LOBBY_NAME_MAX_LENGTH']} characters or less"

    return True, None


def placeholder_indices(text: str) -> List[int]:
    """Distinct {n} placeholder indices in a prompt, sorted."""
    return sorted({int(match) for match in PLACEHOLDER_PATTERN.findall(text)})


def fill_prompt(text: str, cards: List[str]) -> str:
    """
    Substitute cards into a prompt's placeholders.

    Placeholders without a matching card are left as a blank line.
    """
    def _replace(match):
        index = int(match.group(1))
        return cards[index] if index < len(cards) else '_____'

    return PLACEHOLDER_PATTERN.sub(_replace, text)
