import logging
import threading
from collections import deque
from dataclasses import dataclass, replace
from typing import List, Optional

from dice_roller.models import Game, HistoryEntry, SessionStats
from .dice import DiceRoller
from .scoring import decide_winner, total, win_rate

logger = logging.getLogger(__name__)

MAX_HISTORY = 10
DEFAULT_HISTORY_LIMIT = MAX_HISTORY


class GameNotFound(LookupError):
    """Raised when an operation needs a current game and none was started."""

    def __init__(self, message: str = 'No active game found'):
        super().__init__(message)


@dataclass(frozen=True)
class RollResult:
    player_dice: List[int]
    computer_dice: List[int]
    winner: str
    player_total: int
    computer_total: int

    def to_dict(self):
        return {
            'playerDice': list(self.player_dice),
            'computerDice': list(self.computer_dice),
            'winner': self.winner,
            'playerTotal': self.player_total,
            'computerTotal': self.computer_total,
        }


class GameSession:
    """In-memory state for one server process.

    Owns the current game, the running counters and the completed-game
    history. Every read and write goes through one lock so that
    ``stats.total_games`` always equals the sum of wins, losses and ties.
    """

    def __init__(self, dice: Optional[DiceRoller] = None, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self.dice = dice or DiceRoller()
        if history_limit < 0:
            raise ValueError("history_limit must not be negative")
        self.history_limit = min(history_limit, MAX_HISTORY)
        self._lock = threading.Lock()
        self._current_game: Optional[Game] = None
        self._stats = SessionStats()
        # Only the newest entries are ever served, so older ones are dropped
        self._history = deque(maxlen=self.history_limit)

    @property
    def current_game(self) -> Optional[Game]:
        with self._lock:
            return replace(self._current_game) if self._current_game else None

    def start(self) -> str:
        with self._lock:
            self._current_game = Game()
            logger.debug('Started game %s', self._current_game.id)
            return self._current_game.id

    def reset(self):
        """Start a new session: zero the counters and replace the current game.

        Returns ``(game_id, stats)``. History is left untouched.
        """
        with self._lock:
            if self._current_game is None:
                raise GameNotFound()
            self._stats = SessionStats()
            self._current_game = Game()
            logger.debug('Reset session, new game %s', self._current_game.id)
            return self._current_game.id, replace(self._stats)

    def roll(self, game_id: Optional[str] = None) -> RollResult:
        with self._lock:
            game = self._current_game
            if game is None:
                raise GameNotFound()
            if game_id is not None and game_id != game.id:
                logger.debug('Roll requested for game %s but current game is %s', game_id, game.id)

            player_dice = self.dice.roll_pair()
            computer_dice = self.dice.roll_pair()
            player_total = total(player_dice)
            computer_total = total(computer_dice)
            winner = decide_winner(player_total, computer_total)

            self._stats.record(winner)
            game.complete(player_total, computer_total, winner)
            self._history.append(HistoryEntry.from_game(game, player_dice, computer_dice))

            return RollResult(
                player_dice=player_dice,
                computer_dice=computer_dice,
                winner=winner,
                player_total=player_total,
                computer_total=computer_total,
            )

    def stats(self) -> SessionStats:
        with self._lock:
            return replace(self._stats)

    def stats_payload(self):
        stats = self.stats()
        payload = stats.to_dict()
        payload['playerWinRate'] = win_rate(stats.player_wins, stats.total_games)
        return payload

    def history(self, limit: Optional[int] = None) -> List[HistoryEntry]:
        """Most recent completed games, newest first."""
        limit = self.history_limit if limit is None else min(limit, self.history_limit)
        if limit <= 0:
            return []
        with self._lock:
            return list(reversed(self._history))[:limit]
