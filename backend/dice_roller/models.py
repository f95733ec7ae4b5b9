from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
import uuid

STATUS_STARTED = 'started'
STATUS_COMPLETED = 'completed'

WINNER_PLAYER = 'player'
WINNER_COMPUTER = 'computer'
WINNER_TIE = 'tie'


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_game_id() -> str:
    """Generate an opaque, unique game identifier."""
    return uuid.uuid4().hex


@dataclass
class SessionStats:
    total_games: int = 0
    player_wins: int = 0
    computer_wins: int = 0
    ties: int = 0

    def record(self, winner: str) -> None:
        if winner == WINNER_PLAYER:
            self.player_wins += 1
        elif winner == WINNER_COMPUTER:
            self.computer_wins += 1
        elif winner == WINNER_TIE:
            self.ties += 1
        else:
            raise ValueError(f'Unknown winner: {winner!r}')
        self.total_games += 1

    def to_dict(self):
        return {
            'totalGames': self.total_games,
            'playerWins': self.player_wins,
            'computerWins': self.computer_wins,
            'ties': self.ties,
        }


@dataclass
class Game:
    id: str = field(default_factory=generate_game_id)
    status: str = STATUS_STARTED
    player_score: int = 0
    computer_score: int = 0
    winner: Optional[str] = None
    timestamp: datetime = field(default_factory=utcnow)

    def complete(self, player_total: int, computer_total: int, winner: str) -> None:
        self.player_score = player_total
        self.computer_score = computer_total
        self.status = STATUS_COMPLETED
        self.winner = winner

    def to_dict(self):
        data = {
            'id': self.id,
            'status': self.status,
            'playerScore': self.player_score,
            'computerScore': self.computer_score,
            'timestamp': self.timestamp.isoformat(),
        }
        if self.winner is not None:
            data['winner'] = self.winner
        return data


@dataclass(frozen=True)
class HistoryEntry:
    """Snapshot of one completed game and the dice that decided it."""
    game_id: str
    status: str
    player_score: int
    computer_score: int
    winner: str
    player_dice: List[int]
    computer_dice: List[int]
    timestamp: datetime

    @classmethod
    def from_game(cls, game: Game, player_dice: List[int], computer_dice: List[int]) -> 'HistoryEntry':
        return cls(
            game_id=game.id,
            status=game.status,
            player_score=game.player_score,
            computer_score=game.computer_score,
            winner=game.winner,
            player_dice=list(player_dice),
            computer_dice=list(computer_dice),
            timestamp=utcnow(),
        )

    def to_dict(self):
        return {
            'id': self.game_id,
            'status': self.status,
            'playerScore': self.player_score,
            'computerScore': self.computer_score,
            'winner': self.winner,
            'playerDice': list(self.player_dice),
            'computerDice': list(self.computer_dice),
            'timestamp': self.timestamp.isoformat(),
        }
