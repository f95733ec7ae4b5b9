"""Unit tests for the in-memory game session."""

import random
import threading

import pytest

from dice_roller.services.games.dice import DiceRoller
from dice_roller.services.games.scoring import decide_winner, win_rate
from dice_roller.services.games.session import GameNotFound, GameSession
from conftest import ScriptedRandom


def make_session(*faces, history_limit=10):
    return GameSession(dice=DiceRoller(rng=ScriptedRandom(*faces)), history_limit=history_limit)


class TestScoring:
    def test_higher_player_sum_wins(self) -> None:
        assert decide_winner(12, 2) == 'player'

    def test_higher_computer_sum_wins(self) -> None:
        assert decide_winner(5, 9) == 'computer'

    def test_equal_sums_tie(self) -> None:
        assert decide_winner(7, 7) == 'tie'

    def test_win_rate_without_games_is_zero(self) -> None:
        assert win_rate(0, 0) == 0

    def test_win_rate_rounds(self) -> None:
        assert win_rate(2, 3) == 66.7


class TestGameSession:
    def test_roll_before_start_raises_and_records_nothing(self) -> None:
        session = make_session()
        with pytest.raises(GameNotFound):
            session.roll()
        assert session.stats().total_games == 0
        assert session.history() == []

    def test_reset_before_start_raises(self) -> None:
        session = make_session()
        with pytest.raises(GameNotFound):
            session.reset()
        assert session.current_game is None

    def test_start_leaves_stats_and_history_alone(self) -> None:
        session = make_session(6, 6, 1, 1)
        session.start()
        session.roll()
        session.start()
        assert session.stats().total_games == 1
        assert len(session.history()) == 1
        game = session.current_game
        assert game.status == 'started'
        assert game.player_score == 0 and game.computer_score == 0
        assert game.winner is None

    def test_roll_completes_current_game(self) -> None:
        session = make_session(6, 6, 1, 1)
        game_id = session.start()
        result = session.roll(game_id)
        assert result.winner == 'player'
        assert result.player_total == 12
        assert result.computer_total == 2
        game = session.current_game
        assert game.id == game_id
        assert game.status == 'completed'
        assert game.winner == 'player'

    def test_roll_with_stale_game_id_still_rolls(self) -> None:
        session = make_session(1, 1, 2, 2)
        session.start()
        assert session.roll('not-the-current-game').winner == 'computer'

    def test_history_entries_are_snapshots(self) -> None:
        session = make_session(6, 6, 1, 1, 1, 1, 6, 6)
        session.start()
        session.roll()
        session.roll()
        newest, oldest = session.history()
        assert oldest.winner == 'player'
        assert newest.winner == 'computer'
        assert oldest.timestamp <= newest.timestamp

    def test_history_limit(self) -> None:
        session = make_session(history_limit=3)
        session.dice.rng.queue(*([2, 2, 1, 1] * 5))
        session.start()
        for _ in range(5):
            session.roll()
        assert len(session.history()) == 3
        assert len(session.history(limit=5)) == 3
        assert len(session.history(limit=2)) == 2
        assert session.history(limit=0) == []

    def test_history_never_exceeds_ten(self) -> None:
        session = make_session(history_limit=50)
        assert session.history_limit == 10
        session.dice.rng.queue(*([2, 2, 1, 1] * 12 + [1, 1, 2, 2]))
        session.start()
        for _ in range(13):
            session.roll()
        history = session.history(limit=50)
        assert len(history) == 10
        assert history[0].winner == 'computer'
        assert all(entry.winner == 'player' for entry in history[1:])
        assert session.stats().total_games == 13

    def test_reset_zeroes_counters(self) -> None:
        session = make_session(6, 6, 1, 1)
        first = session.start()
        session.roll()
        game_id, stats = session.reset()
        assert game_id != first
        assert stats.to_dict() == {'totalGames': 0, 'playerWins': 0, 'computerWins': 0, 'ties': 0}
        assert session.stats_payload()['playerWinRate'] == 0

    def test_totals_stay_consistent_with_random_rolls(self) -> None:
        session = GameSession(dice=DiceRoller(rng=random.Random(1234)))
        session.start()
        for _ in range(200):
            result = session.roll()
            assert all(1 <= face <= 6 for face in result.player_dice + result.computer_dice)
            assert 2 <= result.player_total <= 12
            assert 2 <= result.computer_total <= 12
            assert result.winner == decide_winner(result.player_total, result.computer_total)
        stats = session.stats()
        assert stats.total_games == 200
        assert stats.player_wins + stats.computer_wins + stats.ties == stats.total_games

    def test_concurrent_rolls_keep_counters_consistent(self) -> None:
        session = GameSession(dice=DiceRoller(rng=random.Random(99)))
        session.start()

        def worker():
            for _ in range(50):
                session.roll()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        stats = session.stats()
        assert stats.total_games == 400
        assert stats.player_wins + stats.computer_wins + stats.ties == 400
        assert len(session.history()) == 10


class TestDiceRoller:
    def test_pair_in_range(self) -> None:
        dice = DiceRoller()
        for _ in range(50):
            pair = dice.roll_pair()
            assert len(pair) == 2
            assert all(1 <= face <= 6 for face in pair)

    def test_seeded_rolls_repeat(self) -> None:
        first = DiceRoller.from_seed(7)
        second = DiceRoller.from_seed(7)
        assert [first.roll_pair() for _ in range(5)] == [second.roll_pair() for _ in range(5)]

    def test_invalid_sides(self) -> None:
        with pytest.raises(ValueError):
            DiceRoller(sides=0)
