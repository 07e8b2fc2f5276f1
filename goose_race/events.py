"""Events emitted by a single game transition, in the order they happen."""

from __future__ import annotations

from dataclasses import dataclass


class Event:
    """Marker base class for everything that can appear in an event log."""

    __slots__ = ()


@dataclass(frozen=True)
class PlayerAdded(Event):
    name: str


@dataclass(frozen=True)
class PlayerRolledDice(Event):
    """Only emitted when the game rolled the dice itself."""

    name: str
    total: int


@dataclass(frozen=True)
class PlayerLandedOn(Event):
    name: str
    space: int


@dataclass(frozen=True)
class PlayerLandedOnGoose(Event):
    name: str
    space: int


@dataclass(frozen=True)
class PlayerTraversedBridge(Event):
    name: str
    from_space: int
    to_space: int


@dataclass(frozen=True)
class PlayerBounced(Event):
    name: str


@dataclass(frozen=True)
class PlayerGotPranked(Event):
    victim: str
    prankster: str
    destination: int


@dataclass(frozen=True)
class PlayerWon(Event):
    name: str
