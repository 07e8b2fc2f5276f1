"""Game runner: plays whole games with dice, for simulations."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

from goose_race.board import Board
from goose_race.events import Event
from goose_race.game import Game, new_game
from goose_race.players import Dice, roll_dice, seeded_dice

MAX_TURNS = 500  # safety valve for boards where nobody can reach the end


# ── Structured types ────────────────────────────────────────────────

@dataclass
class GameResult:
    winner: str | None  # None when max_turns ran out
    reason: str  # "win" | "max_turns"
    turns: int = 0
    final: Game | None = None


@dataclass
class SimulationSummary:
    """Aggregate over many automated games."""

    wins: dict[str, int] = field(default_factory=dict)
    turns: list[int] = field(default_factory=list)
    unfinished: int = 0

    @property
    def games(self) -> int:
        return len(self.turns)

    @property
    def average_turns(self) -> float:
        return sum(self.turns) / len(self.turns) if self.turns else 0.0


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives each transition's events as a game is played."""

    def on_events(self, events: list[Event]) -> None: ...


@dataclass
class ListObserver:
    """Default observer, collects events into one flat list."""

    events: list[Event] = field(default_factory=list)

    def on_events(self, events: list[Event]) -> None:
        self.events.extend(events)


# ── Runner ───────────────────────────────────────────────────────────

class GameRunner:
    """Play one full game, every player rolling in turn."""

    def __init__(
        self,
        board: Board,
        names: list[str],
        dice: Dice = roll_dice,
        max_turns: int = MAX_TURNS,
        observer: GameObserver | None = None,
    ):
        assert names, "a game needs at least one player"
        self.board = board
        self.names = list(names)
        self.dice = dice
        self.max_turns = max_turns
        self.observer = observer or ListObserver()

    def play(self) -> GameResult:
        game: Game = new_game(self.board)
        for name in self.names:
            game, events = game.add_player(name)
            self.observer.on_events(events)

        turns = 0
        while turns < self.max_turns:
            name = self.names[turns % len(self.names)]
            game, events = game.move_player(name, dice=self.dice)
            self.observer.on_events(events)
            turns += 1

            if game.is_finished:
                return GameResult(
                    winner=game.winner.name, reason="win",
                    turns=turns, final=game,
                )

        return GameResult(winner=None, reason="max_turns", turns=turns, final=game)


def simulate(
    board: Board,
    names: list[str],
    games: int,
    rng: random.Random | None = None,
    max_turns: int = MAX_TURNS,
) -> SimulationSummary:
    """Play *games* games between *names* and tally who wins."""
    rng = rng or random.Random()
    dice = seeded_dice(rng)
    summary = SimulationSummary(wins={name: 0 for name in names})

    for _ in range(games):
        result = GameRunner(board, names, dice=dice, max_turns=max_turns).play()
        summary.turns.append(result.turns)
        if result.winner is None:
            summary.unfinished += 1
        else:
            summary.wins[result.winner] += 1

    return summary
