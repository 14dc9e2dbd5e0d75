"""
Main lobby management system.

Handles player registration, lobby creation and lifecycle, and
coordinates between the connection registry and lobby membership.
"""

import logging
import threading
from typing import Optional, List, Dict, Tuple, Any
from datetime import datetime, timedelta

from .models import LobbyData, PlayerData, LobbyStatus
from .connection_manager import ConnectionManager
from .player_manager import PlayerManager
from utils.constants import ERROR_MESSAGES, GAME_CONFIG
from utils.helpers import generate_id, validate_lobby_name

logger = logging.getLogger(__name__)


class LobbyManager:
    """
    The session directory: every registered player and every lobby.

    All state lives in memory. Callers that mutate lobbies or their games
    hold `lock` for the whole resolve, mutate and broadcast sequence.
    """

    def __init__(self,
                 connection_manager: Optional[ConnectionManager] = None,
                 player_manager: Optional[PlayerManager] = None,
                 max_lobby_players: int = GAME_CONFIG['MAX_LOBBY_CAPACITY'],
                 default_max_rounds: int = GAME_CONFIG['MAX_ROUNDS']):
        self.connection_manager = connection_manager or ConnectionManager()
        self.player_manager = player_manager or PlayerManager()
        self.max_lobby_players = max_lobby_players
        self.default_max_rounds = default_max_rounds
        self.lobbies: Dict[str, LobbyData] = {}
        self.lock = threading.RLock()

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    def register_player(self, sid: str, name: str) -> Tuple[bool, str, Optional[PlayerData]]:
        """Register or rename the player on a connection."""
        return self.connection_manager.register_player(sid, name)

    def get_player(self, sid: str) -> Optional[PlayerData]:
        return self.connection_manager.get_player(sid)

    # ------------------------------------------------------------------
    # Lobbies
    # ------------------------------------------------------------------

    def list_waiting_lobbies(self, viewer_sid: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Summaries of every lobby accepting players.

        Args:
            viewer_sid: Requesting connection; personalizes isHost

        Returns:
            List of lobby summaries in creation order
        """
        viewer = self.connection_manager.get_player(viewer_sid) if viewer_sid else None
        viewer_id = viewer.player_id if viewer else None
        return [
            lobby.to_summary(viewer_id)
            for lobby in self.lobbies.values()
            if lobby.status == LobbyStatus.WAITING
        ]

    def create_lobby(self, sid: str, name: str,
                     max_players: int,
                     max_rounds: Optional[int] = None) -> Tuple[bool, str, Optional[LobbyData]]:
        """
        Create a new lobby hosted by the requesting player.

        The host joins the lobby immediately.

        Args:
            sid: Host's connection
            name: Lobby name
            max_players: Capacity, between 2 and the configured ceiling
            max_rounds: Rounds per game; defaults to the server setting

        Returns:
            tuple: (success, message, lobby_data)
        """
        player = self.connection_manager.get_player(sid)
        if not player:
            return False, ERROR_MESSAGES['NAME_REQUIRED'], None

        if player.lobby_id:
            return False, ERROR_MESSAGES['ALREADY_IN_LOBBY'], None

        is_valid, error_msg = validate_lobby_name(name)
        if not is_valid:
            return False, error_msg, None

        if not GAME_CONFIG['MIN_LOBBY_CAPACITY'] <= max_players <= self.max_lobby_players:
            return False, (f"Lobby size must be between {GAME_CONFIG['MIN_LOBBY_CAPACITY']} "
                           f"and {self.max_lobby_players} players"), None

        if max_rounds is None:
            max_rounds = self.default_max_rounds
        if not 1 <= max_rounds <= GAME_CONFIG['MAX_ROUNDS_LIMIT']:
            return False, f"Rounds must be between 1 and {GAME_CONFIG['MAX_ROUNDS_LIMIT']}", None

        lobby_data = LobbyData(
            lobby_id=generate_id(),
            name=name.strip(),
            max_players=max_players,
            host_id=player.player_id,
            max_rounds=max_rounds
        )
        self.lobbies[lobby_data.lobby_id] = lobby_data
        self.player_manager.add_player(lobby_data, player)

        logger.info(f"Created lobby {lobby_data.name} ({lobby_data.lobby_id}) hosted by {player.name}")
        return True, "Lobby created successfully", lobby_data

    def join_lobby(self, sid: str, lobby_id: str) -> Tuple[bool, str, Optional[LobbyData]]:
        """
        Add the requesting player to a lobby.

        When several failures apply only the first is reported, in the
        order: not found, not waiting, already in a lobby, full.

        Returns:
            tuple: (success, message, lobby_data)
        """
        player = self.connection_manager.get_player(sid)
        if not player:
            return False, ERROR_MESSAGES['NAME_REQUIRED'], None

        lobby_data = self.lobbies.get(lobby_id)
        if not lobby_data:
            return False, ERROR_MESSAGES['LOBBY_NOT_FOUND'], None

        if not lobby_data.is_waiting:
            return False, ERROR_MESSAGES['LOBBY_NOT_WAITING'], None

        if player.lobby_id:
            return False, ERROR_MESSAGES['ALREADY_IN_LOBBY'], None

        success, message, _ = self.player_manager.add_player(lobby_data, player)
        if not success:
            return False, message, None

        return True, "Joined lobby", lobby_data

    def leave_lobby(self, sid: str) -> Tuple[bool, str, Optional[LobbyData]]:
        """
        Remove the requesting player from their lobby.

        Idempotent: a player without a lobby gets a successful no-op. A
        player leaving a running game stays in the game's roster, flagged
        as disconnected. A lobby left empty is deleted.

        Returns:
            tuple: (success, message, lobby_data) - lobby_data is the lobby
            that was left, or None if the player was in no lobby
        """
        player = self.connection_manager.get_player(sid)
        if not player or not player.lobby_id:
            return True, "Not in a lobby", None

        lobby_data = self.lobbies.get(player.lobby_id)
        if not lobby_data:
            player.lobby_id = None
            player.is_host = False
            return True, "Not in a lobby", None

        success, message, _ = self.player_manager.remove_player(lobby_data, player.player_id)
        if not success:
            return False, message, None

        if lobby_data.round_engine:
            lobby_data.round_engine.set_connected(player.player_id, False)

        if not lobby_data.members:
            self._delete_lobby(lobby_data.lobby_id, "last member left")

        return True, message, lobby_data

    def drop_connection(self, sid: str) -> Tuple[Optional[PlayerData], Optional[LobbyData]]:
        """
        Clean up after a disconnect: leave the lobby, then forget the player.

        Returns:
            tuple: (removed_player, lobby_left)
        """
        _, _, lobby_data = self.leave_lobby(sid)
        player = self.connection_manager.unregister(sid)
        return player, lobby_data

    def get_lobby(self, lobby_id: str) -> Optional[LobbyData]:
        return self.lobbies.get(lobby_id)

    def get_player_lobby(self, sid: str) -> Optional[LobbyData]:
        """Lobby the connection's player is currently in."""
        player = self.connection_manager.get_player(sid)
        if not player or not player.lobby_id:
            return None
        return self.lobbies.get(player.lobby_id)

    def is_active(self, lobby_id: str) -> bool:
        return lobby_id in self.lobbies

    def cleanup_inactive_lobbies(self, now: Optional[datetime] = None,
                                 inactive_minutes: int = GAME_CONFIG['LOBBY_INACTIVE_MINUTES']) -> int:
        """
        Delete waiting lobbies with no members that are older than the
        inactivity threshold.

        Args:
            now: Reference time (defaults to now)
            inactive_minutes: Age after which an empty lobby is reaped

        Returns:
            Number of lobbies deleted
        """
        now = now or datetime.now()
        cutoff = now - timedelta(minutes=inactive_minutes)

        stale = [
            lobby_id for lobby_id, lobby in self.lobbies.items()
            if lobby.status == LobbyStatus.WAITING
            and not lobby.members
            and lobby.created_at < cutoff
        ]
        for lobby_id in stale:
            self._delete_lobby(lobby_id, "inactive")

        if stale:
            logger.info(f"Cleaned up {len(stale)} inactive lobbies")
        return len(stale)

    @property
    def lobby_count(self) -> int:
        return len(self.lobbies)

    def _delete_lobby(self, lobby_id: str, reason: str) -> None:
        lobby_data = self.lobbies.pop(lobby_id, None)
        if lobby_data:
            logger.info(f"Deleted lobby {lobby_data.name} ({lobby_id}): {reason}")
