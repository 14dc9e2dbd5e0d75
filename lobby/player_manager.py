"""
Player management for lobbies.

Handles lobby membership: joining, leaving and host reassignment.
"""

import logging
from typing import Optional, Tuple
from utils.constants import ERROR_MESSAGES
from .models import PlayerData, LobbyData

logger = logging.getLogger(__name__)


class PlayerManager:
    """Manages player membership within lobbies."""

    def add_player(self, lobby_data: LobbyData, player: PlayerData) -> Tuple[bool, str, Optional[PlayerData]]:
        """
        Add a player to a lobby.

        Args:
            lobby_data: The lobby to add player to
            player: Registered player joining

        Returns:
            tuple: (success, message, player_data)
        """
        if lobby_data.is_full:
            return False, ERROR_MESSAGES['LOBBY_FULL'], None

        if lobby_data.get_member(player.player_id):
            return False, ERROR_MESSAGES['ALREADY_IN_LOBBY'], None

        lobby_data.members.append(player)
        player.lobby_id = lobby_data.lobby_id
        player.is_host = player.player_id == lobby_data.host_id

        logger.info(f"Player {player.name} added to lobby {lobby_data.name} "
                    f"({lobby_data.player_count}/{lobby_data.max_players})")
        return True, "Player added successfully", player

    def remove_player(self, lobby_data: LobbyData, player_id: str) -> Tuple[bool, str, Optional[PlayerData]]:
        """
        Remove a player from a lobby.

        If the host leaves, the longest-standing remaining member becomes host.

        Args:
            lobby_data: The lobby to remove player from
            player_id: Id of player to remove

        Returns:
            tuple: (success, message, new_host) - new_host is set only when
            the host changed
        """
        player = lobby_data.get_member(player_id)
        if not player:
            return False, "Player not found in lobby", None

        lobby_data.members.remove(player)
        player.lobby_id = None
        player.is_host = False

        new_host = None
        if lobby_data.host_id == player_id and lobby_data.members:
            new_host = lobby_data.members[0]
            lobby_data.host_id = new_host.player_id
            new_host.is_host = True
            logger.info(f"Host of lobby {lobby_data.name} passed to {new_host.name}")

        logger.info(f"Player {player.name} removed from lobby {lobby_data.name}")
        return True, f"Player {player.name} removed", new_host
