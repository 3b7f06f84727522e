from __future__ import annotations

"""Thin adapter over `bowling.engine` for front-ends and checks.

Exposes `RollStream`, an iterator that replays a list of rolls into a fresh
game and yields one structured record per roll with the per-frame raw and
bonus scores as they stand right after that roll. Bonus pins reach earlier
frames the moment a later roll is recorded, so the records show exactly
when each strike or spare was settled.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from bowling.engine import Game


@dataclass
class RollOutcome:
    """Simple record for a roll and the game state it left behind."""

    # Frame position (1..10) the roll was recorded in
    frame: int
    pins: int

    # One entry per frame that exists after the roll
    raw_scores: Tuple[int, ...]
    bonus_scores: Tuple[int, ...]

    # Running totals, None until a frame is settled
    frame_totals: Tuple[Optional[int], ...]

    game_over: bool = False
    score: Optional[int] = None


def RollStream(rolls: Iterable[int], game: Optional[Game] = None) -> Iterator[RollOutcome]:
    """Yield a structured outcome for each roll.

    An illegal roll raises BowlingError from the engine and ends the stream.
    """
    game = Game() if game is None else game

    for pins in rolls:
        position = len(game.frames)
        game.roll(pins)

        frames = game.frames
        over = game.is_done()
        yield RollOutcome(
            frame=position,
            pins=pins,
            raw_scores=tuple(f.raw_score() for f in frames),
            bonus_scores=tuple(f.bonus_score() for f in frames),
            frame_totals=tuple(game.round.frame_totals()),
            game_over=over,
            score=game.score() if over else None,
        )


def replay_score(rolls: Iterable[int]) -> int:
    """Replay rolls into a fresh game and return its final score.

    Raises BowlingError if a roll is illegal or the rolls do not finish a game.
    """
    game = Game()
    for _ in RollStream(rolls, game):
        pass
    return game.score()


__all__ = ["RollOutcome", "RollStream", "replay_score"]
