"""Board configuration and movement rules for the Goose race."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from goose_race.errors import UnresolvableMove

DEFAULT_LAST_SPACE = 63
DEFAULT_GOOSE_SPACES: frozenset[int] = frozenset({5, 9, 14, 18, 23, 27})
DEFAULT_BRIDGES: dict[int, int] = {6: 12}

MAX_RULE_STEPS = 1000  # safety valve against boards whose rules never settle


@dataclass(frozen=True)
class Board:
    """Static track layout.

    The board is trusted as given: ``last_space`` should be at least 12,
    bridges should stay on the track and no combination of bridges and goose
    spaces should loop forever.
    """

    last_space: int
    goose_spaces: frozenset[int] = frozenset()
    bridges: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze caller-supplied collections so the board stays a value
        object.__setattr__(self, "goose_spaces", frozenset(self.goose_spaces))
        object.__setattr__(self, "bridges", MappingProxyType(dict(self.bridges)))

    def __hash__(self) -> int:
        return hash((self.last_space, self.goose_spaces, tuple(sorted(self.bridges.items()))))

    def is_goose(self, space: int) -> bool:
        return space in self.goose_spaces

    def bridge_dest(self, space: int) -> int | None:
        return self.bridges.get(space)


DEFAULT_BOARD = Board(
    last_space=DEFAULT_LAST_SPACE,
    goose_spaces=DEFAULT_GOOSE_SPACES,
    bridges=DEFAULT_BRIDGES,
)


# ── Rule events ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Bounced:
    """The move overshot the last space and was reflected back."""


@dataclass(frozen=True)
class LandedOnGoose:
    space: int


@dataclass(frozen=True)
class TraversedBridge:
    from_space: int
    to_space: int


RuleEvent = Union[Bounced, LandedOnGoose, TraversedBridge]


@dataclass
class MoveResult:
    """Where a move comes to rest and which rules fired on the way."""

    final_position: int
    events: list[RuleEvent] = field(default_factory=list)


def resolve_move(board: Board, start: int, roll: int) -> MoveResult:
    """Compute where a piece on *start* ends up after moving *roll* spaces.

    Rules are applied until the piece settles on a plain space. The roll is
    carried unchanged through every step; only the point it is added to
    moves:

    * overshooting ``last_space`` reflects the piece back by the excess
    * a goose space moves the piece *roll* spaces again
    * a bridge sends the piece to its destination

    Does NOT touch any game state. Raises ``UnresolvableMove`` when the rules
    have not settled after ``MAX_RULE_STEPS`` applications.
    """
    position = start
    events: list[RuleEvent] = []

    for _ in range(MAX_RULE_STEPS):
        target = position + roll

        if target > board.last_space:
            # Boards shorter than the largest roll can push this below zero
            events.append(Bounced())
            position = board.last_space - (target - board.last_space) - roll
            continue

        if board.is_goose(target):
            events.append(LandedOnGoose(target))
            position = target
            continue

        dest = board.bridge_dest(target)
        if dest is not None:
            events.append(TraversedBridge(target, dest))
            # Re-adding the roll next iteration lands exactly on dest
            position = dest - roll
            continue

        return MoveResult(final_position=target, events=events)

    raise UnresolvableMove(start, roll, MAX_RULE_STEPS)
