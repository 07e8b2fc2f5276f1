"""Tests for goose_race.runner (automated play + simulation)."""

import random

from goose_race.board import DEFAULT_BOARD, Board
from goose_race.events import (
    PlayerAdded,
    PlayerGotPranked,
    PlayerLandedOn,
    PlayerRolledDice,
    PlayerWon,
)
from goose_race.runner import GameResult, GameRunner, ListObserver, simulate


class FakeDice:
    """Deterministic dice for testing: returns a scripted sequence of totals."""

    def __init__(self, script: list[int]):
        self.script = list(script)
        self._idx = 0

    def __call__(self) -> int:
        total = self.script[self._idx % len(self.script)]
        self._idx += 1
        return total


# ── GameRunner ───────────────────────────────────────────────────────

def test_single_player_reaches_the_end():
    runner = GameRunner(Board(12), ["Solo"], dice=FakeDice([4]))
    result = runner.play()

    assert isinstance(result, GameResult)
    assert result.winner == "Solo"
    assert result.reason == "win"
    assert result.turns == 3
    assert result.final is not None and result.final.is_finished


def test_players_take_turns_in_order():
    runner = GameRunner(Board(12), ["A", "B"], dice=FakeDice([6, 5, 6]))
    result = runner.play()

    assert result.winner == "A"
    assert result.turns == 3
    assert result.final.player_position("B") == 5


def test_max_turns_without_winner():
    """Both players keep pranking each other back to the start."""
    runner = GameRunner(Board(12), ["A", "B"], dice=FakeDice([4]), max_turns=6)
    result = runner.play()

    assert result.winner is None
    assert result.reason == "max_turns"
    assert result.turns == 6


def test_observer_sees_every_event():
    observer = ListObserver()
    GameRunner(Board(12), ["Solo"], dice=FakeDice([4]), observer=observer).play()

    assert observer.events == [
        PlayerAdded("Solo"),
        PlayerRolledDice("Solo", 4),
        PlayerLandedOn("Solo", 4),
        PlayerRolledDice("Solo", 4),
        PlayerLandedOn("Solo", 8),
        PlayerRolledDice("Solo", 4),
        PlayerLandedOn("Solo", 12),
        PlayerWon("Solo"),
    ]


def test_observer_sees_pranks():
    observer = ListObserver()
    GameRunner(Board(12), ["A", "B"], dice=FakeDice([4]), max_turns=2, observer=observer).play()

    assert PlayerGotPranked("A", "B", 0) in observer.events


# ── simulate ─────────────────────────────────────────────────────────

def test_simulate_counts_every_game():
    summary = simulate(DEFAULT_BOARD, ["P1", "P2"], games=20, rng=random.Random(3))

    assert summary.games == 20
    assert sum(summary.wins.values()) + summary.unfinished == 20
    assert set(summary.wins) == {"P1", "P2"}
    assert summary.average_turns > 0


def test_simulate_is_reproducible_with_seed():
    a = simulate(DEFAULT_BOARD, ["P1", "P2", "P3"], games=10, rng=random.Random(11))
    b = simulate(DEFAULT_BOARD, ["P1", "P2", "P3"], games=10, rng=random.Random(11))

    assert a.wins == b.wins
    assert a.turns == b.turns


def test_simulate_reports_unfinished_games():
    summary = simulate(DEFAULT_BOARD, ["P1"], games=3, rng=random.Random(0), max_turns=1)

    # Nobody reaches 63 in one roll
    assert summary.unfinished == 3
    assert summary.wins == {"P1": 0}
    assert summary.turns == [1, 1, 1]
