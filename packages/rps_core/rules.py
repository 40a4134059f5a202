# packages/rps_core/rules.py
from __future__ import annotations

from rps_core.moves import Move, ensure_move
from rps_core.session_types import RoundOutcome

# 循环克制：石头 > 剪刀 > 布 > 石头
BEATS: dict[Move, Move] = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}


def beats(move: Move) -> Move:
    """返回 `move` 能击败的那一手。"""
    return BEATS[ensure_move(move)]


def resolve(first: Move, second: Move) -> RoundOutcome:
    first = ensure_move(first)
    second = ensure_move(second)
    if first is second:
        return RoundOutcome.DRAW
    if BEATS[first] is second:
        return RoundOutcome.FIRST_WINS
    return RoundOutcome.SECOND_WINS


__all__ = ["BEATS", "beats", "resolve"]
