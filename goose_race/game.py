"""Game state machine for immutable running and finished games."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from goose_race.board import Board, Bounced, LandedOnGoose, RuleEvent, TraversedBridge, resolve_move
from goose_race.errors import PlayerAlreadyExists, PlayerNotFound
from goose_race.events import (
    Event,
    PlayerAdded,
    PlayerBounced,
    PlayerGotPranked,
    PlayerLandedOn,
    PlayerLandedOnGoose,
    PlayerRolledDice,
    PlayerTraversedBridge,
    PlayerWon,
)
from goose_race.players import Dice, Player, roll_dice


class Game(ABC):
    """Common read-only API of both game states.

    Every operation returns a new game together with the events it caused;
    no game is ever changed in place. Once a player reaches the last space
    the result is a ``FinishedGame``, and from then on every operation
    returns that same game with no events.
    """

    board: Board
    players: tuple[Player, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "players", tuple(self.players))

    @property
    def is_finished(self) -> bool:
        return isinstance(self, FinishedGame)

    @property
    def player_names(self) -> list[str]:
        return [p.name for p in self.players]

    def find_player(self, name: str) -> Player:
        for p in self.players:
            if p.name == name:
                return p
        raise PlayerNotFound(name)

    def player_position(self, name: str) -> int:
        return self.find_player(name).position

    @abstractmethod
    def add_player(self, name: str) -> tuple[Game, list[Event]]: ...

    @abstractmethod
    def move_player(
        self,
        name: str,
        amount: int | None = None,
        *,
        dice: Dice = roll_dice,
    ) -> tuple[Game, list[Event]]: ...


# ── Running ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RunningGame(Game):
    board: Board
    players: tuple[Player, ...] = ()

    def add_player(self, name: str) -> tuple[Game, list[Event]]:
        if any(p.name == name for p in self.players):
            raise PlayerAlreadyExists(name)
        game = RunningGame(self.board, self.players + (Player(name),))
        return game, [PlayerAdded(name)]

    def move_player(
        self,
        name: str,
        amount: int | None = None,
        *,
        dice: Dice = roll_dice,
    ) -> tuple[Game, list[Event]]:
        """Move *name* by *amount*, or by a fresh dice roll when omitted.

        Event order: the roll (dice only), every rule that fired, any
        pranked players, where the mover ended up, and finally the win.
        """
        mover = self.find_player(name)
        events: list[Event] = []

        if amount is None:
            amount = dice()
            events.append(PlayerRolledDice(name, amount))

        result = resolve_move(self.board, mover.position, amount)
        events.extend(_tag_rule_event(name, e) for e in result.events)

        # Anyone already on the landing space swaps back to where the mover came from
        landing = result.final_position
        players: list[Player] = []
        for p in self.players:
            if p.name == name:
                players.append(p.moved_to(landing))
            elif p.position == landing:
                events.append(PlayerGotPranked(p.name, name, mover.position))
                players.append(p.moved_to(mover.position))
            else:
                players.append(p)
        events.append(PlayerLandedOn(name, landing))

        # The mover wins first; otherwise anyone left on the last space does
        at_end = [p for p in players if p.position == self.board.last_space]
        if at_end:
            winner = next((p for p in at_end if p.name == name), at_end[0])
            events.append(PlayerWon(winner.name))
            return FinishedGame(self.board, tuple(players), winner), events

        return RunningGame(self.board, tuple(players)), events


def _tag_rule_event(name: str, event: RuleEvent) -> Event:
    if isinstance(event, Bounced):
        return PlayerBounced(name)
    if isinstance(event, LandedOnGoose):
        return PlayerLandedOnGoose(name, event.space)
    if isinstance(event, TraversedBridge):
        return PlayerTraversedBridge(name, event.from_space, event.to_space)
    raise TypeError(f"Unknown rule event: {event!r}")


# ── Finished ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FinishedGame(Game):
    """Terminal state. Further operations are no-ops."""

    board: Board
    players: tuple[Player, ...]
    winner: Player

    def add_player(self, name: str) -> tuple[Game, list[Event]]:
        return self, []

    def move_player(
        self,
        name: str,
        amount: int | None = None,
        *,
        dice: Dice = roll_dice,
    ) -> tuple[Game, list[Event]]:
        return self, []


def new_game(board: Board, players: Iterable[Player] = ()) -> RunningGame:
    """Start a game on *board*, optionally with players already placed."""
    seeded: list[Player] = []
    for p in players:
        if any(s.name == p.name for s in seeded):
            raise PlayerAlreadyExists(p.name)
        seeded.append(p)
    return RunningGame(board, tuple(seeded))
