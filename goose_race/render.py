"""Turn events into the sentences the CLI prints."""

from __future__ import annotations

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
from goose_race.game import Game


def describe(event: Event, game: Game) -> str:
    """One human-readable sentence for *event*.

    *game* is the state returned alongside the event; it is only consulted
    to list the current players.
    """
    if isinstance(event, PlayerLandedOn):
        return f"{event.name} ended up on {event.space}."
    if isinstance(event, PlayerLandedOnGoose):
        return f"{event.name} landed on the goose field {event.space}. Moving again."
    if isinstance(event, PlayerTraversedBridge):
        return f"{event.name} traversed bridge from {event.from_space} to {event.to_space}."
    if isinstance(event, PlayerBounced):
        return f"{event.name} bounced back from the end of the board."
    if isinstance(event, PlayerWon):
        return f"{event.name} has won the game."
    if isinstance(event, PlayerAdded):
        names = ", ".join(game.player_names)
        return f"{event.name} was added to the game. Current players: {names}."
    if isinstance(event, PlayerRolledDice):
        return f"{event.name} rolled {event.total}."
    if isinstance(event, PlayerGotPranked):
        return (
            f"{event.prankster} pranked {event.victim}, "
            f"who moves back to {event.destination}."
        )
    raise TypeError(f"Unknown event: {event!r}")


def describe_all(events: list[Event], game: Game) -> list[str]:
    return [describe(e, game) for e in events]
