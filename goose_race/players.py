"""Player value type and dice."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable

# Each die gives 0–4, plus one; two of them give a total of 2–10.
DIE_FACES = 5

Dice = Callable[[], int]


@dataclass(frozen=True)
class Player:
    name: str
    position: int = 0

    def moved_to(self, position: int) -> Player:
        return Player(self.name, position)


def roll_dice(rng: random.Random | None = None) -> int:
    """Roll two dice and return the total.

    Uses the module-level generator unless *rng* is given, so simulations
    can be seeded.
    """
    source = rng or random
    return source.randrange(DIE_FACES) + source.randrange(DIE_FACES) + 2


def seeded_dice(rng: random.Random) -> Dice:
    """A zero-argument roller bound to *rng*, for ``Game.move_player``."""
    return lambda: roll_dice(rng)
