"""Command-line tools for playing Rock-Paper-Scissors."""

__all__ = [
    "play_cli",
]
