"""CLI entry point: python -m goose_race {play,simulate}."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import Iterable

from goose_race.board import DEFAULT_BOARD, Board
from goose_race.chart import make_wins_chart
from goose_race.errors import GooseError
from goose_race.game import Game, new_game
from goose_race.render import describe
from goose_race.runner import MAX_TURNS, simulate


MOVE_RE = re.compile(r"move ([^ ]+) ?([0-9]+)?$")
ADD_RE = re.compile(r"add ([^ ]+)$")

HELP_TEXT = """\
Available commands:
 - help
   Display this text.
 - move <player> <spaces>?
   Move the player. Will either roll the dice or move the given amount.
 - add <player>
   Add a player with the given name.
 - exit
   Leave the game."""


# ── board options ────────────────────────────────────────────────────

def _bridge(text: str) -> tuple[int, int]:
    try:
        src, dest = text.split(":")
        return int(src), int(dest)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected FROM:TO, got {text!r}") from None


def _board_from_args(args: argparse.Namespace) -> Board:
    """Build the board from CLI flags, falling back to the default layout."""
    return Board(
        last_space=args.last_space if args.last_space is not None else DEFAULT_BOARD.last_space,
        goose_spaces=args.goose if args.goose is not None else DEFAULT_BOARD.goose_spaces,
        bridges=dict(args.bridge) if args.bridge is not None else DEFAULT_BOARD.bridges,
    )


# ── play ─────────────────────────────────────────────────────────────

def play_session(game: Game, lines: Iterable[str]) -> Game:
    """Run the command loop over *lines* until exit, end of input, or a win.

    Returns the last game state.
    """
    print("Welcome to Goose. Type 'help' for... help.")
    print("> ", end="", flush=True)

    for raw in lines:
        line = raw.strip()

        move = MOVE_RE.match(line)
        add = ADD_RE.match(line)

        if line == "exit":
            break
        if line == "help":
            print(HELP_TEXT)
        elif move:
            name, by = move.groups()
            game = _apply(game, game.move_player, name, int(by) if by else None)
        elif add:
            game = _apply(game, game.add_player, add.group(1))
        else:
            print("Unknown command. Try 'help'.")

        if game.is_finished:
            break
        print("> ", end="", flush=True)

    return game


def _apply(game: Game, operation, *args) -> Game:
    """Run one core operation; on failure report it and keep the old game."""
    try:
        new_state, events = operation(*args)
    except GooseError as e:
        print(e, file=sys.stderr)
        return game
    for event in events:
        print(describe(event, new_state))
    return new_state


def cmd_play(args: argparse.Namespace) -> None:
    """Interactive game on stdin/stdout."""
    play_session(new_game(_board_from_args(args)), sys.stdin)


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Play many automated games and report wins per seat."""
    board = _board_from_args(args)
    names = [f"P{i + 1}" for i in range(args.players)]
    rng = random.Random(args.seed)

    print(f"Simulating {args.games} games with {args.players} players ... ", end="", flush=True)
    summary = simulate(board, names, args.games, rng=rng, max_turns=args.max_turns)
    print("done")

    print("\nWins per seat")
    print("=" * 40)
    for name, wins in summary.wins.items():
        print(f"  {name:30s} {wins:7d}")
    print(f"\nAverage game length: {summary.average_turns:.1f} turns")
    if summary.unfinished:
        print(f"{summary.unfinished} games hit the {args.max_turns}-turn limit", file=sys.stderr)

    if args.chart:
        make_wins_chart(summary.wins, output_path=args.chart)
        print(f"Chart saved to {args.chart}")


# ── main ─────────────────────────────────────────────────────────────

def _add_board_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--last-space", type=int, help=f"Winning space (default {DEFAULT_BOARD.last_space})")
    p.add_argument("--goose", type=int, action="append", help="Goose space (repeatable)")
    p.add_argument("--bridge", type=_bridge, action="append", help="Bridge FROM:TO (repeatable)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goose_race",
        description="The Goose board race",
    )
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play interactively")
    _add_board_options(p_play)

    p_sim = sub.add_parser("simulate", help="Simulate automated games")
    _add_board_options(p_sim)
    p_sim.add_argument("--games", type=int, default=100, help="Games to play (default 100)")
    p_sim.add_argument("--players", type=int, default=2, help="Players per game (default 2)")
    p_sim.add_argument("--seed", type=int, help="Random seed")
    p_sim.add_argument("--max-turns", type=int, default=MAX_TURNS, help="Max turns per game")
    p_sim.add_argument("--chart", "-o", help="Output PNG path for a wins chart")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "play":
        cmd_play(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
