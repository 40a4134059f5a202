# packages/rps_core/moves.py
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class InvalidMoveError(ValueError):
    """输入不在 Rock/Paper/Scissors 三者之内"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid move: {value!r}")


class Move(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def label(self) -> str:
        return MOVE_LABELS[self]


MOVES: tuple[Move, ...] = (Move.ROCK, Move.PAPER, Move.SCISSORS)

MOVE_LABELS: dict[Move, str] = {
    Move.ROCK: "Rock",
    Move.PAPER: "Paper",
    Move.SCISSORS: "Scissors",
}

# 提示里的数字快捷键沿用旧版顺序：1 石头，2 剪刀，3 布
_BUILTIN_ALIASES: dict[str, Move] = {
    "rock": Move.ROCK,
    "paper": Move.PAPER,
    "scissors": Move.SCISSORS,
    "1": Move.ROCK,
    "2": Move.SCISSORS,
    "3": Move.PAPER,
}

MOVE_ART: dict[Move, str] = {
    Move.ROCK: "\n".join(
        [
            "     _______",
            "---'   ____)",
            "      (_____)",
            "      (_____)",
            "      (____)",
            "---.__(___)",
        ]
    ),
    Move.PAPER: "\n".join(
        [
            "     _______",
            "---'    ____)____",
            "           ______)",
            "          _______)",
            "         _______)",
            "---.__________)",
        ]
    ),
    Move.SCISSORS: "\n".join(
        [
            "    _______",
            "---'   ____)____",
            "          ______)",
            "       __________)",
            "      (____)",
            "---.__(___)",
        ]
    ),
}


def ensure_move(value: object) -> Move:
    """统一校验入口：只接受 Move 成员。"""
    if not isinstance(value, Move):
        raise InvalidMoveError(value)
    return value


def parse_move(text: str | None, aliases: Mapping[str, str] | None = None) -> Move:
    """
    把玩家输入解析为 Move：
    - 去空白、小写
    - 内置别名：英文名 + 数字 1/2/3
    - 额外别名（配置提供）：alias -> move 名
    """
    key = (text or "").strip().lower()
    if key in _BUILTIN_ALIASES:
        return _BUILTIN_ALIASES[key]
    for alias, name in (aliases or {}).items():
        if str(alias).strip().lower() != key:
            continue
        try:
            return Move(str(name).strip().lower())
        except ValueError:
            # 配置里写错了目标名，按无效输入处理
            break
    raise InvalidMoveError(text)


__all__ = [
    "InvalidMoveError",
    "MOVES",
    "MOVE_ART",
    "MOVE_LABELS",
    "Move",
    "ensure_move",
    "parse_move",
]
