"""
Phase time-boxing.

When a phase has a configured duration, a background task waits it out
and then asks the GameManager to act for whoever the phase is still
waiting on. A duration of 0 disables the timer for that phase.
"""

import logging
import time
from typing import Callable, Dict, Optional, Set, Tuple

from lobby.models import LobbyData
from .models import GamePhase

logger = logging.getLogger(__name__)

# (lobby_id, game_id, round, phase)
TimerKey = Tuple[str, str, int, str]


class PhaseTimer:
    """Schedules one timeout per (lobby, game, round, phase)."""

    def __init__(self, socketio, lobby_manager, game_manager,
                 submit_timeout: int = 0,
                 judge_timeout: int = 0,
                 results_timeout: int = 0):
        self.socketio = socketio
        self.lobby_manager = lobby_manager
        self.game_manager = game_manager
        self.durations: Dict[GamePhase, int] = {
            GamePhase.PLAYING: submit_timeout,
            GamePhase.JUDGING: judge_timeout,
            GamePhase.RESULTS: results_timeout,
        }
        self._scheduled: Set[TimerKey] = set()
        # Called with the lobby after a timeout changed its game
        self.on_timeout: Optional[Callable[[LobbyData], None]] = None

    @property
    def enabled(self) -> bool:
        return any(d > 0 for d in self.durations.values())

    def schedule(self, lobby_data: LobbyData) -> bool:
        """
        Start the timer for the lobby's current phase.

        Sets the engine's phase_deadline so clients can render countdowns.
        Scheduling the same (lobby, game, round, phase) twice is a no-op.

        Returns:
            True if a new timer was started
        """
        engine = lobby_data.round_engine
        if engine is None:
            return False

        duration = self.durations.get(engine.phase, 0)
        if duration <= 0:
            engine.phase_deadline = None
            return False

        key = (lobby_data.lobby_id, engine.game_id, engine.current_round, engine.phase.value)
        if key in self._scheduled:
            return False

        self._scheduled.add(key)
        engine.phase_deadline = time.time() + duration
        logger.info(f"Timer set for lobby {key[0]} round {key[2]} {key[3]}: {duration}s")

        self.socketio.start_background_task(self._worker, key, duration)
        return True

    def _worker(self, key: TimerKey, delay: int) -> None:
        self.socketio.sleep(delay)
        lobby_id, game_id, round_number, phase = key
        try:
            with self.lobby_manager.lock:
                self._scheduled.discard(key)
                changed, lobby_data = self.game_manager.handle_timeout(lobby_id, game_id, round_number, phase)
                if not changed or lobby_data is None:
                    return

                logger.info(f"Timer fired for lobby {lobby_id} round {round_number} {phase}")
                self.schedule(lobby_data)
                if self.on_timeout:
                    self.on_timeout(lobby_data)
        except Exception as e:
            logger.error(f"Error handling timeout for lobby {lobby_id}: {e}")
