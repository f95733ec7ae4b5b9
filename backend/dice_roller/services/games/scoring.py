from typing import Sequence

from dice_roller.models import WINNER_COMPUTER, WINNER_PLAYER, WINNER_TIE


def decide_winner(player_total: int, computer_total: int) -> str:
    """Higher sum wins; equal sums tie."""
    if player_total > computer_total:
        return WINNER_PLAYER
    if computer_total > player_total:
        return WINNER_COMPUTER
    return WINNER_TIE


def total(dice: Sequence[int]) -> int:
    return sum(dice)


def win_rate(wins: int, games: int) -> float:
    """Percentage of ``games`` won, rounded to one decimal. 0 with no games."""
    if not games:
        return 0.0
    return round(wins / games * 100, 1)
