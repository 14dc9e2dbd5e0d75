"""
Game Manager - Coordinator for game operations.

Resolves a connection to its player, lobby and round engine, starts games
and forwards in-game actions to the engine. Also the entry point for
timeout-driven actions taken on a player's behalf.
"""

import logging
import random
from typing import Optional, Tuple

from lobby.manager import LobbyManager
from lobby.models import LobbyData, LobbyStatus, PlayerData
from utils.constants import ERROR_MESSAGES, GAME_CONFIG
from .deck import Deck, InsufficientCards
from .models import GamePhase, GamePlayer
from .round_engine import RoundEngine

logger = logging.getLogger(__name__)

ActionResult = Tuple[bool, str, Optional[LobbyData]]


class GameManager:
    """Coordinates game operations within lobbies."""

    def __init__(self,
                 lobby_manager: LobbyManager,
                 deck: Optional[Deck] = None,
                 hand_size: int = GAME_CONFIG['HAND_SIZE'],
                 refill_hands: bool = False,
                 rng: Optional[random.Random] = None):
        self.lobby_manager = lobby_manager
        self.deck = deck or Deck()
        self.hand_size = hand_size
        self.refill_hands = refill_hands
        self.rng = rng or random.Random()

    def start_game(self, sid: str) -> ActionResult:
        """
        Start a game in the requester's lobby.

        Members are snapshotted in join order; that order is the judge
        rotation for the whole game. A finished lobby can be restarted.

        Args:
            sid: Requesting connection, must be the lobby host

        Returns:
            tuple: (success, message, lobby_data)
        """
        lobby_data = self.lobby_manager.get_player_lobby(sid)
        if not lobby_data:
            return False, ERROR_MESSAGES['NOT_IN_LOBBY'], None

        if lobby_data.status == LobbyStatus.IN_GAME:
            return False, ERROR_MESSAGES['GAME_IN_PROGRESS'], None

        player = self.lobby_manager.get_player(sid)
        if player.player_id != lobby_data.host_id:
            return False, ERROR_MESSAGES['NOT_HOST'], None

        if lobby_data.player_count < GAME_CONFIG['MIN_PLAYERS']:
            return False, ERROR_MESSAGES['NOT_ENOUGH_PLAYERS'], None

        players = [GamePlayer(player_id=m.player_id, name=m.name) for m in lobby_data.members]
        try:
            engine = RoundEngine(
                lobby_id=lobby_data.lobby_id,
                players=players,
                deck=self.deck,
                hand_size=self.hand_size,
                max_rounds=lobby_data.max_rounds,
                refill_hands=self.refill_hands,
                rng=self.rng
            )
        except InsufficientCards as e:
            logger.warning(f"Cannot start game in lobby {lobby_data.lobby_id}: {e}")
            return False, ERROR_MESSAGES['INSUFFICIENT_CARDS'], None

        lobby_data.attach_game(engine)
        return True, "Game started", lobby_data

    def select_card(self, sid: str, hand_index: int) -> ActionResult:
        return self._apply(sid, 'select_card', hand_index)

    def submit_cards(self, sid: str) -> ActionResult:
        return self._apply(sid, 'submit_cards')

    def select_winner(self, sid: str, submission_index: int) -> ActionResult:
        return self._apply(sid, 'select_winner', submission_index)

    def next_round(self, sid: str) -> ActionResult:
        """
        Advance past the results. Ends the game, and marks the lobby
        finished, once the round limit is reached.
        """
        return self._apply(sid, 'next_round')

    def handle_timeout(self, lobby_id: str, game_id: str, round_number: int,
                       phase: str) -> Tuple[bool, Optional[LobbyData]]:
        """
        Act for the players a timed-out phase is waiting on.

        Ignored unless the lobby is still running the given game, in the
        given round and phase. Playing: each missing player submits their
        selection, or their first cards if they picked nothing. Judging: the
        judge picks a random submission. Results: the judge advances the round.

        Returns:
            tuple: (changed, lobby_data)
        """
        lobby_data = self.lobby_manager.get_lobby(lobby_id)
        if not lobby_data or not lobby_data.round_engine:
            return False, None

        engine = lobby_data.round_engine
        if (engine.game_id != game_id or engine.current_round != round_number
                or engine.phase.value != phase):
            logger.debug(f"Stale timeout for lobby {lobby_id} round {round_number} {phase}")
            return False, None

        changed = False
        if engine.phase == GamePhase.PLAYING:
            for player in engine.waiting_for():
                if not engine.pending_selections.get(player.player_id):
                    hand = engine.hands.get(player.player_id, [])
                    for index in range(min(engine.current_prompt.blanks, len(hand))):
                        engine.select_card(player.player_id, index)
                submitted, _ = engine.submit_cards(player.player_id)
                changed = changed or submitted
                if submitted:
                    logger.info(f"Lobby {lobby_id}: submitted for {player.name} after timeout")

        elif engine.phase == GamePhase.JUDGING:
            if engine.submissions:
                index = self.rng.randrange(len(engine.submissions))
                changed, _ = engine.select_winner(engine.judge.player_id, index)
                logger.info(f"Lobby {lobby_id}: picked winner for judge {engine.judge.name} after timeout")

        elif engine.phase == GamePhase.RESULTS:
            changed, _ = engine.next_round(engine.judge.player_id)
            if engine.is_game_over:
                lobby_data.finish_game()

        return changed, lobby_data

    def _resolve(self, sid: str) -> Tuple[Optional[PlayerData], Optional[LobbyData]]:
        player = self.lobby_manager.get_player(sid)
        if not player:
            return None, None
        return player, self.lobby_manager.get_player_lobby(sid)

    def _apply(self, sid: str, action: str, *args) -> ActionResult:
        """Run an engine action for the connection's player."""
        player, lobby_data = self._resolve(sid)
        if not player or not lobby_data or not lobby_data.round_engine:
            logger.debug(f"Ignoring {action} from {sid}: no running game")
            return False, "No active game", None

        engine = lobby_data.round_engine
        changed, message = getattr(engine, action)(player.player_id, *args)
        if not changed:
            logger.debug(f"Ignoring {action} from {player.name}: {message}")
            return False, message, lobby_data

        if engine.is_game_over:
            lobby_data.finish_game()

        return True, message, lobby_data
