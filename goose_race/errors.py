"""Errors raised by the game core."""

from __future__ import annotations


class GooseError(Exception):
    """Base class; the CLI catches this and keeps the previous game."""


class PlayerAlreadyExists(GooseError):
    def __init__(self, name: str):
        super().__init__(f"Player already exists: {name}")
        self.name = name


class PlayerNotFound(GooseError):
    def __init__(self, name: str):
        super().__init__(f"Player doesn't exist: {name}")
        self.name = name


class UnresolvableMove(GooseError):
    """The board's rules kept firing without the piece settling."""

    def __init__(self, start: int, roll: int, steps: int):
        super().__init__(
            f"Move of {roll} from space {start} did not settle after {steps} rule steps"
        )
        self.start = start
        self.roll = roll
        self.steps = steps
