"""
Lobby Module for Trump Against Humanity.

Contains all lobby management logic and components.
Handles player registration, lobby lifecycle and membership.
"""

from .models import LobbyData, LobbyStatus, PlayerData
from .manager import LobbyManager
from .player_manager import PlayerManager
from .connection_manager import ConnectionManager

__all__ = [
    # Data models
    'LobbyData',
    'LobbyStatus',
    'PlayerData',

    # Managers
    'LobbyManager',
    'PlayerManager',
    'ConnectionManager'
]
