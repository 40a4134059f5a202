"""
Interactive Rock-Paper-Scissors in the terminal.

Usage examples:

  # Prompt for mode and rounds, write game_stats.txt in the current directory
  python -m tools.play_cli

  # Five rounds against the computer, reproducible computer moves, no colours
  python -m tools.play_cli --mode single --rounds 5 --seed 7 --no-color

Notes:
  - Moves are entered by name or number (1: Rock, 2: Scissors, 3: Paper).
  - The report is written once all rounds are played; closing stdin aborts
    the game without writing it.
"""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from rps_core.config_loader import GameConfig, load_game_config
from rps_core.moves import MOVE_ART, InvalidMoveError, Move, parse_move
from rps_core.report import write_report
from rps_core.rng import RNG, computer_move
from rps_core.session import Session, outcome_label, side_label
from rps_core.session_types import GameMode, RoundOutcome

_LOG = logging.getLogger(__name__)

Prompt = Callable[[str], str]


@dataclass(frozen=True)
class Palette:
    reset: str = "\033[0m"
    red: str = "\033[31m"
    green: str = "\033[32m"
    yellow: str = "\033[33m"
    blue: str = "\033[34m"

    @classmethod
    def plain(cls) -> Palette:
        return cls(reset="", red="", green="", yellow="", blue="")

    def paint(self, color: str, text: str) -> str:
        return f"{color}{text}{self.reset}"


def _ask(prompt: Prompt | None, text: str) -> str:
    return (prompt or input)(text)


def choose_mode(prompt: Prompt | None = None) -> GameMode:
    print("Choose a game mode:")
    print("1. Single player (vs computer)")
    print("2. Two players")
    raw = _ask(prompt, "Your choice: ").strip()
    if raw == "1":
        return GameMode.SINGLE
    if raw == "2":
        return GameMode.MULTI
    print("Invalid choice, defaulting to: Single player")
    _LOG.debug("unknown mode choice %r; using single player", raw)
    return GameMode.SINGLE


def choose_rounds(default: int, prompt: Prompt | None = None) -> int:
    raw = _ask(prompt, "Enter the number of rounds: ").strip()
    try:
        rounds = int(raw)
    except ValueError:
        _LOG.debug("rounds input %r not a number; using default %d", raw, default)
        rounds = default
    return max(1, rounds)


def ask_move(
    player_no: int,
    aliases: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
) -> Move:
    while True:
        raw = _ask(
            prompt,
            f"Player {player_no}, enter your choice (1: Rock, 2: Scissors, 3: Paper): ",
        )
        try:
            return parse_move(raw, aliases)
        except InvalidMoveError:
            print("Invalid input. Try again.")


def _show_choice(name: str, move: Move, color: str, palette: Palette, show_art: bool) -> None:
    print(palette.paint(color, f"{name} chose: {move.label}"))
    if show_art:
        print(MOVE_ART[move])


def play(
    session: Session,
    rounds: int,
    *,
    rnd: random.Random,
    config: GameConfig,
    palette: Palette,
    show_art: bool = True,
    prompt: Prompt | None = None,
) -> Session:
    mode = session.mode
    for n in range(1, rounds + 1):
        print(palette.paint(palette.yellow, f"\nRound {n} of {rounds}"))
        first = ask_move(1, config.aliases, prompt)
        if mode is GameMode.SINGLE:
            second = computer_move(rnd)
        else:
            second = ask_move(2, config.aliases, prompt)

        print()
        _show_choice(side_label(mode, second=False), first, palette.green, palette, show_art)
        _show_choice(side_label(mode, second=True), second, palette.red, palette, show_art)

        record = session.record_round(first, second)
        color = {
            RoundOutcome.DRAW: palette.yellow,
            RoundOutcome.FIRST_WINS: palette.green,
            RoundOutcome.SECOND_WINS: palette.red,
        }[record.outcome]
        print(palette.paint(color, f"{outcome_label(record.outcome, mode)}!"))
    return session


def print_summary(session: Session, palette: Palette) -> None:
    s = session.summary()
    print(palette.paint(palette.blue, "\nFinal statistics:"))
    print(f"{side_label(session.mode, second=False)} wins: {s.first_wins}")
    print(f"{side_label(session.mode, second=True)} wins: {s.second_wins}")
    print(f"Draws: {s.draws}")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Play Rock-Paper-Scissors in the terminal")
    p.add_argument("--mode", choices=[m.value for m in GameMode], default=None)
    p.add_argument("--rounds", type=int, default=None, help="Number of rounds (prompted if omitted)")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's moves")
    p.add_argument("--out", default=None, help="Report path (default from config: game_stats.txt)")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    p.add_argument("--no-art", action="store_true", help="Do not print ASCII art for moves")
    p.add_argument("--debug", action="store_true")
    return p.parse_args(argv)


def main(argv: list[str] | None = None, prompt: Prompt | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    config = load_game_config()
    palette = Palette.plain() if args.no_color else Palette()

    print(palette.paint(palette.blue, "Rock-Paper-Scissors"))
    try:
        mode = GameMode(args.mode) if args.mode else choose_mode(prompt)
        if args.rounds is not None:
            rounds = max(1, args.rounds)
        else:
            rounds = choose_rounds(config.default_rounds, prompt)
        session = play(
            Session(mode),
            rounds,
            rnd=RNG(seed=args.seed).create(),
            config=config,
            palette=palette,
            show_art=not args.no_art,
            prompt=prompt,
        )
    except EOFError:
        print("\nInput closed; game aborted.")
        _LOG.debug("stdin closed before the game finished; no report written")
        return 1

    print_summary(session, palette)
    out = write_report(session, Path(args.out or config.report_file))
    print(f"\nGame statistics saved to '{out}'")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
