"""Ten-pin bowling scorekeeper.

`bowling.engine` holds the frame rules and the game facade; `bowling.cli`
is the text mode front end (`python -m bowling`).
"""

from .engine import BowlingError, Game, create

__all__ = ["BowlingError", "Game", "create", "engine", "cli"]
