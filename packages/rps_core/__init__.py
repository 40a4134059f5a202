"""Rock-Paper-Scissors rules, sessions and reports."""

from rps_core.moves import MOVES, InvalidMoveError, Move, parse_move
from rps_core.rules import resolve
from rps_core.session import EmptySessionError, Session
from rps_core.session_types import GameMode, RoundOutcome, RoundRecord, SessionSummary

__all__ = [
    "EmptySessionError",
    "GameMode",
    "InvalidMoveError",
    "MOVES",
    "Move",
    "RoundOutcome",
    "RoundRecord",
    "Session",
    "SessionSummary",
    "parse_move",
    "resolve",
]
