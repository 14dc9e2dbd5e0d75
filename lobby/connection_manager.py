"""
Connection Manager for Trump Against Humanity.

The player registry: maps each socket connection to the Player it
registered. Contains no lobby or game logic - purely connection and
identity tracking.
"""

import logging
from typing import Dict, Optional, Tuple
from datetime import datetime

from utils.constants import ERROR_MESSAGES
from utils.helpers import generate_id, validate_display_name
from .models import PlayerData

logger = logging.getLogger(__name__)


class ConnectionManager:
    """
    Owns every registered Player.

    A Player is created when a connection sets a display name and is
    destroyed when that connection drops. Display names need not be unique.
    """

    def __init__(self):
        self.players: Dict[str, PlayerData] = {}  # socket_id -> PlayerData
        logger.debug("Connection manager initialized")

    def register_player(self, socket_id: str, name: str) -> Tuple[bool, str, Optional[PlayerData]]:
        """
        Register a display name for a connection.

        Registering again from the same connection renames the existing
        player, unless that player is inside a lobby.

        Args:
            socket_id: Unique socket connection ID
            name: Display name

        Returns:
            tuple: (success, message, player_data)
        """
        is_valid, error_msg = validate_display_name(name)
        if not is_valid:
            return False, error_msg or ERROR_MESSAGES['INVALID_NAME'], None

        name = name.strip()
        existing = self.players.get(socket_id)
        if existing:
            if existing.lobby_id:
                return False, ERROR_MESSAGES['CANNOT_RENAME_IN_LOBBY'], None
            logger.info(f"Player {existing.player_id} renamed from {existing.name} to {name}")
            existing.name = name
            existing.last_activity = datetime.now()
            return True, "Name updated", existing

        player = PlayerData(player_id=generate_id(), name=name, sid=socket_id)
        self.players[socket_id] = player

        logger.info(f"Registered player {name} ({player.player_id}) on {socket_id}")
        return True, "Name set", player

    def unregister(self, socket_id: str) -> Optional[PlayerData]:
        """
        Forget the player registered on a connection.

        Returns:
            The removed player, or None if the connection never registered
        """
        player = self.players.pop(socket_id, None)
        if player is None:
            return None

        logger.info(f"Player {player.name} ({player.player_id}) removed")
        return player

    def get_player(self, socket_id: str) -> Optional[PlayerData]:
        """Get the player registered on a connection."""
        return self.players.get(socket_id)

    @property
    def player_count(self) -> int:
        return len(self.players)
