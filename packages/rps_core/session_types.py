# packages/rps_core/session_types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rps_core.moves import Move


class RoundOutcome(Enum):
    DRAW = "draw"
    FIRST_WINS = "first_wins"
    SECOND_WINS = "second_wins"


class GameMode(Enum):
    SINGLE = "single"  # 玩家 vs 电脑
    MULTI = "multi"  # 玩家 vs 玩家


@dataclass(frozen=True)
class RoundRecord:
    index: int  # 第几局（从 1 开始）
    first: Move
    second: Move
    outcome: RoundOutcome


@dataclass(frozen=True)
class SessionSummary:
    first_wins: int = 0
    second_wins: int = 0
    draws: int = 0
    total: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "first_wins": self.first_wins,
            "second_wins": self.second_wins,
            "draws": self.draws,
            "total": self.total,
        }
