"""
Round Engine for Trump Against Humanity.

The authoritative state machine for one game session:
Playing -> Judging -> Results -> Playing (next round) | GameOver.

Every action method returns (changed, message). A False result is a
silent no-op: the action was stale, duplicated, or came from the wrong
player, and nothing was mutated. Nothing here raises for expected
precondition failures.
"""

import logging
import random
from typing import Dict, List, Optional, Tuple, Any

from utils.constants import GAME_CONFIG
from utils.helpers import generate_id
from .deck import Deck
from .models import GamePhase, GamePlayer, PromptTemplate, Submission

logger = logging.getLogger(__name__)


class RoundEngine:
    """
    Governs one game: hands, prompts, selections, submissions, judging,
    scoring, judge rotation and termination.

    The player list is a fixed snapshot taken at game start. Its order is
    the judge rotation and never changes, even if members later leave the
    lobby.
    """

    def __init__(self,
                 lobby_id: str,
                 players: List[GamePlayer],
                 deck: Deck,
                 hand_size: int = GAME_CONFIG['HAND_SIZE'],
                 max_rounds: int = GAME_CONFIG['MAX_ROUNDS'],
                 refill_hands: bool = False,
                 rng: Optional[random.Random] = None):
        """
        Shuffle, deal and open round 1.

        Args:
            lobby_id: Owning lobby
            players: Participants in rotation order
            deck: Catalog to shuffle from
            hand_size: Cards dealt to each player
            max_rounds: Rounds before the game ends
            refill_hands: Top hands back up to hand_size between rounds
            rng: Optional random source for deterministic games

        Raises:
            InsufficientCards: If the catalog cannot deal every hand
            ValueError: If the player list is empty or has duplicate ids
        """
        if not players:
            raise ValueError("Cannot start a game without players")
        player_ids = [p.player_id for p in players]
        if len(set(player_ids)) != len(player_ids):
            raise ValueError("Duplicate player ids in game snapshot")
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")

        self.lobby_id = lobby_id
        # Distinguishes this game from earlier games in the same lobby
        self.game_id = generate_id()
        self.players: List[GamePlayer] = [
            GamePlayer(player_id=p.player_id, name=p.name, score=p.score, connected=p.connected)
            for p in players
        ]
        self.hand_size = hand_size
        self.max_rounds = max_rounds
        self.refill_hands = refill_hands
        self._rng = rng or random.Random()

        self.deck: List[str] = deck.shuffled_cards(self._rng)
        self.prompts: List[PromptTemplate] = deck.shuffled_prompts(self._rng)

        self.hands: Dict[str, List[str]] = {}
        for player in self.players:
            self.hands[player.player_id], self.deck = Deck.draw(self.deck, hand_size)

        self.current_round = 1
        self.current_judge_index = 0
        self.current_prompt: PromptTemplate = self.prompts[0]
        self.phase = GamePhase.PLAYING
        self.pending_selections: Dict[str, List[int]] = {}
        self.submissions: List[Submission] = []
        self.round_winner: Optional[Dict[str, Any]] = None
        self.winning_combination: Optional[Dict[str, Any]] = None
        # Set by a phase timer so clients can render countdowns
        self.phase_deadline: Optional[float] = None

        logger.info(f"Game started in lobby {lobby_id} with {len(self.players)} players, "
                    f"{max_rounds} rounds, judge {self.judge.name}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def judge(self) -> GamePlayer:
        return self.players[self.current_judge_index]

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def get_player(self, player_id: str) -> Optional[GamePlayer]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def is_judge(self, player_id: str) -> bool:
        return self.judge.player_id == player_id

    def has_submitted(self, player_id: str) -> bool:
        return any(sub.player_id == player_id for sub in self.submissions)

    def non_judge_players(self) -> List[GamePlayer]:
        return [p for p in self.players if p.player_id != self.judge.player_id]

    def waiting_for(self) -> List[GamePlayer]:
        """Players the current phase is blocked on."""
        if self.phase == GamePhase.PLAYING:
            return [p for p in self.non_judge_players() if not self.has_submitted(p.player_id)]
        if self.phase in (GamePhase.JUDGING, GamePhase.RESULTS):
            return [self.judge]
        return []

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def select_card(self, player_id: str, hand_index: int) -> Tuple[bool, str]:
        """
        Toggle a card in the player's pending selection.

        Selecting beyond the prompt's blanks drops the oldest selected
        index, so a full selection always holds exactly `blanks` indices
        with the newest at the back.
        """
        if self.phase != GamePhase.PLAYING:
            return False, "Not accepting selections"

        if self.get_player(player_id) is None:
            return False, "Player not in this game"

        if self.is_judge(player_id):
            return False, "Judge does not select cards"

        if self.has_submitted(player_id):
            return False, "Cards already submitted"

        hand = self.hands.get(player_id, [])
        if not isinstance(hand_index, int) or isinstance(hand_index, bool) \
                or not 0 <= hand_index < len(hand):
            return False, "Card index out of range"

        selection = self.pending_selections.setdefault(player_id, [])
        if hand_index in selection:
            selection.remove(hand_index)
            logger.debug(f"Player {player_id} deselected card {hand_index}")
        elif len(selection) < self.current_prompt.blanks:
            selection.append(hand_index)
            logger.debug(f"Player {player_id} selected card {hand_index} "
                         f"({len(selection)}/{self.current_prompt.blanks})")
        else:
            selection.pop(0)
            selection.append(hand_index)
            logger.debug(f"Player {player_id} replaced oldest selection with card {hand_index}")

        return True, "Selection updated"

    def submit_cards(self, player_id: str) -> Tuple[bool, str]:
        """
        Finalize the player's pending selection as their submission.

        The submitted cards leave the hand for good. Once every non-judge
        player has a submission the round moves to judging.
        """
        if self.phase != GamePhase.PLAYING:
            return False, "Not accepting submissions"

        if self.get_player(player_id) is None:
            return False, "Player not in this game"

        if self.is_judge(player_id):
            return False, "Judge does not submit cards"

        if self.has_submitted(player_id):
            return False, "Cards already submitted"

        selection = self.pending_selections.get(player_id) or []
        if not selection:
            return False, "Nothing selected"

        hand = self.hands[player_id]
        cards = [hand[index] for index in selection]
        for index in sorted(selection, reverse=True):
            del hand[index]

        self.submissions.append(Submission(player_id=player_id, cards=cards))
        self.pending_selections[player_id] = []

        submitted_ids = {sub.player_id for sub in self.submissions}
        required_ids = {p.player_id for p in self.non_judge_players()}
        logger.info(f"Lobby {self.lobby_id}: {len(submitted_ids & required_ids)}/{len(required_ids)} "
                    f"submissions in round {self.current_round}")

        if required_ids <= submitted_ids:
            self.phase = GamePhase.JUDGING
            logger.info(f"Lobby {self.lobby_id}: all players submitted, judging round {self.current_round}")

        return True, "Cards submitted"

    def select_winner(self, player_id: str, submission_index: int) -> Tuple[bool, str]:
        """Judge picks the winning submission; its author scores one point."""
        if self.phase != GamePhase.JUDGING:
            return False, "Not judging"

        if not self.is_judge(player_id):
            return False, "Only the judge can pick a winner"

        if not isinstance(submission_index, int) or isinstance(submission_index, bool) \
                or not 0 <= submission_index < len(self.submissions):
            return False, "Submission index out of range"

        winning = self.submissions[submission_index]
        winner = self.get_player(winning.player_id)
        winner.score += 1

        self.round_winner = {
            'playerId': winner.player_id,
            'player': winner.name
        }
        self.winning_combination = {
            'playerId': winner.player_id,
            'cards': list(winning.cards),
            'text': self.current_prompt.fill(winning.cards)
        }
        self.phase = GamePhase.RESULTS

        logger.info(f"Lobby {self.lobby_id}: {winner.name} won round {self.current_round}")
        return True, "Winner selected"

    def next_round(self, player_id: str) -> Tuple[bool, str]:
        """
        Judge advances past the results.

        Ends the game once the round limit is reached; otherwise the judge
        seat moves one position along the fixed player order.
        """
        if self.phase != GamePhase.RESULTS:
            return False, "Round is not finished"

        if not self.is_judge(player_id):
            return False, "Only the judge can advance the round"

        if self.current_round >= self.max_rounds:
            self.phase = GamePhase.GAME_OVER
            self.phase_deadline = None
            logger.info(f"Game over in lobby {self.lobby_id} after {self.current_round} rounds")
            return True, "Game over"

        self.current_round += 1
        self.current_judge_index = (self.current_judge_index + 1) % len(self.players)
        self.current_prompt = self.prompts[(self.current_round - 1) % len(self.prompts)]
        self.submissions = []
        self.pending_selections = {}
        self.round_winner = None
        self.winning_combination = None
        self.phase = GamePhase.PLAYING

        if self.refill_hands:
            self._refill_hands()

        logger.info(f"Lobby {self.lobby_id}: round {self.current_round}/{self.max_rounds}, "
                    f"judge {self.judge.name}")
        return True, "Next round"

    def set_connected(self, player_id: str, connected: bool) -> bool:
        """Flag a participant's connection; rules are unaffected."""
        player = self.get_player(player_id)
        if player is None:
            return False
        player.connected = connected
        return True

    def _refill_hands(self) -> None:
        for player in self.players:
            hand = self.hands[player.player_id]
            missing = min(self.hand_size - len(hand), len(self.deck))
            if missing > 0:
                drawn, self.deck = Deck.draw(self.deck, missing)
                hand.extend(drawn)

    # ------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------

    def to_public_state(self, viewer_id: Optional[str] = None,
                        player_count: Optional[int] = None) -> Dict[str, Any]:
        """
        Full game state as sent to one client.

        Only the viewer's own hand is included; everyone's hand size is
        published in handCounts.

        Args:
            viewer_id: Player the payload is built for
            player_count: Current lobby membership count (defaults to the
                game snapshot size)
        """
        submissions = [sub.to_dict() for sub in self.submissions]
        hands = {}
        if viewer_id in self.hands:
            hands[viewer_id] = list(self.hands[viewer_id])

        return {
            'lobbyId': self.lobby_id,
            'players': [p.to_dict() for p in self.players],
            'currentRound': self.current_round,
            'maxRounds': self.max_rounds,
            'phase': self.phase.value,
            'currentPrompt': self.current_prompt.to_dict(),
            'currentJudge': self.judge.name,
            'currentJudgeId': self.judge.player_id,
            'currentJudgeIndex': self.current_judge_index,
            'submissions': submissions,
            'submittedCombinations': submissions if self.phase == GamePhase.JUDGING else [],
            'playerSelections': {pid: list(sel) for pid, sel in self.pending_selections.items()},
            'roundWinner': self.round_winner,
            'winningCombination': self.winning_combination,
            'playerCount': len(self.players) if player_count is None else player_count,
            'hands': hands,
            'handCounts': {pid: len(hand) for pid, hand in self.hands.items()},
            'waitingFor': [p.name for p in self.waiting_for()],
            'phaseDeadline': self.phase_deadline
        }
