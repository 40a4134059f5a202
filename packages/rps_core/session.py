# packages/rps_core/session.py
"""
对局会话：按顺序累积每一局结果，并生成文本战报。

- 只追加，不删除/修改已有记录
- summary 每次从记录重新统计（纯投影，不单独存状态）
- 空会话默认返回全 0；需要严格语义时传 require_rounds=True
"""

from __future__ import annotations

import logging

from rps_core.moves import Move, ensure_move
from rps_core.rules import resolve
from rps_core.session_types import GameMode, RoundOutcome, RoundRecord, SessionSummary

_LOG = logging.getLogger(__name__)

REPORT_TITLE = 'Statistics for the "Rock-Paper-Scissors" game'

MODE_LABELS: dict[GameMode, str] = {
    GameMode.SINGLE: "Single player (vs computer)",
    GameMode.MULTI: "Two players",
}


class EmptySessionError(RuntimeError):
    """Raised by strict summary/report calls on a session with no rounds."""


def side_label(mode: GameMode, second: bool) -> str:
    if not second:
        return "Player 1"
    return "Computer" if mode is GameMode.SINGLE else "Player 2"


def outcome_label(outcome: RoundOutcome, mode: GameMode) -> str:
    if outcome is RoundOutcome.DRAW:
        return "Draw"
    return f"{side_label(mode, second=outcome is RoundOutcome.SECOND_WINS)} wins"


class Session:
    def __init__(self, mode: GameMode = GameMode.SINGLE):
        self.mode = mode
        self._rounds: list[RoundRecord] = []

    @property
    def rounds(self) -> tuple[RoundRecord, ...]:
        return tuple(self._rounds)

    def __len__(self) -> int:
        return len(self._rounds)

    def record_round(self, first: Move, second: Move) -> RoundRecord:
        first = ensure_move(first)
        second = ensure_move(second)
        record = RoundRecord(
            index=len(self._rounds) + 1,
            first=first,
            second=second,
            outcome=resolve(first, second),
        )
        self._rounds.append(record)
        _LOG.debug(
            "round %d: %s vs %s -> %s",
            record.index,
            first.value,
            second.value,
            record.outcome.value,
        )
        return record

    def summary(self, *, require_rounds: bool = False) -> SessionSummary:
        if require_rounds and not self._rounds:
            raise EmptySessionError("session has no recorded rounds")
        first_wins = second_wins = draws = 0
        for r in self._rounds:
            if r.outcome is RoundOutcome.FIRST_WINS:
                first_wins += 1
            elif r.outcome is RoundOutcome.SECOND_WINS:
                second_wins += 1
            else:
                draws += 1
        return SessionSummary(
            first_wins=first_wins,
            second_wins=second_wins,
            draws=draws,
            total=len(self._rounds),
        )

    def render_report(self, *, require_rounds: bool = False) -> str:
        summary = self.summary(require_rounds=require_rounds)
        first_name = side_label(self.mode, second=False)
        second_name = side_label(self.mode, second=True)

        lines: list[str] = [REPORT_TITLE, f"Mode: {MODE_LABELS[self.mode]}", ""]
        for r in self._rounds:
            lines.append(
                f"Round {r.index}: {first_name} chose {r.first.label}, "
                f"{second_name} chose {r.second.label} - {outcome_label(r.outcome, self.mode)}"
            )
        lines += [
            "",
            "Final statistics:",
            f"{first_name} wins: {summary.first_wins}",
            f"{second_name} wins: {summary.second_wins}",
            f"Draws: {summary.draws}",
            f"Total rounds: {summary.total}",
        ]
        return "\n".join(lines) + "\n"


__all__ = [
    "EmptySessionError",
    "MODE_LABELS",
    "REPORT_TITLE",
    "Session",
    "outcome_label",
    "side_label",
]
