"""
Data models for lobby management.

These are pure data structures used to pass information between
lobby management, game systems, and handlers.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from datetime import datetime
from enum import Enum
from utils.constants import LOBBY_STATES


class LobbyStatus(Enum):
    """Lobby lifecycle states."""
    WAITING = LOBBY_STATES['WAITING']
    IN_GAME = LOBBY_STATES['IN_GAME']
    FINISHED = LOBBY_STATES['FINISHED']


@dataclass
class PlayerData:
    """Represents one connected player, keyed by its connection."""
    player_id: str
    name: str
    sid: str
    lobby_id: Optional[str] = None
    is_host: bool = False
    connected_at: datetime = field(default_factory=datetime.now)
    last_activity: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.player_id,
            'name': self.name,
            'isHost': self.is_host
        }


@dataclass
class LobbyData:
    """
    Represents a lobby's current state.

    Members are kept in join order. The lobby references players owned by
    the connection manager; it never creates or destroys them.
    """
    lobby_id: str
    name: str
    max_players: int
    host_id: str
    created_at: datetime = field(default_factory=datetime.now)
    max_rounds: int = 10
    members: List[PlayerData] = field(default_factory=list)
    status: LobbyStatus = LobbyStatus.WAITING
    # Present only while status is IN_GAME
    round_engine: Optional[Any] = None
    # Finished engine kept for the final scoreboard
    last_game: Optional[Any] = None

    @property
    def player_count(self) -> int:
        return len(self.members)

    @property
    def is_full(self) -> bool:
        """Check if lobby is at max capacity."""
        return self.player_count >= self.max_players

    @property
    def is_waiting(self) -> bool:
        return self.status == LobbyStatus.WAITING

    @property
    def game(self) -> Optional[Any]:
        """The running engine, or the finished one if the game is over."""
        return self.round_engine or self.last_game

    def get_member(self, player_id: str) -> Optional[PlayerData]:
        """Find member by player id."""
        for player in self.members:
            if player.player_id == player_id:
                return player
        return None

    def attach_game(self, engine: Any) -> None:
        self.round_engine = engine
        self.last_game = None
        self.status = LobbyStatus.IN_GAME

    def finish_game(self) -> None:
        self.last_game = self.round_engine
        self.round_engine = None
        self.status = LobbyStatus.FINISHED

    def to_summary(self, viewer_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Lobby summary as listed and broadcast to clients.

        Args:
            viewer_id: Player the summary is built for; sets isHost
        """
        return {
            'id': self.lobby_id,
            'name': self.name,
            'maxPlayers': self.max_players,
            'currentPlayers': self.player_count,
            'maxRounds': self.max_rounds,
            'status': self.status.value,
            'players': [p.to_dict() for p in self.members],
            'isHost': viewer_id is not None and viewer_id == self.host_id
        }

    def public_game_state(self, viewer_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Game projection for one member, or None if no game has run."""
        game = self.game
        if game is None:
            return None
        return game.to_public_state(viewer_id=viewer_id, player_count=self.player_count)
