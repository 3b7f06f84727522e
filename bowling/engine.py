from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Generator, List, Optional, Tuple, Union
import logging
import random


logger = logging.getLogger(__name__)

PINS = 10
FRAMES = 10


class BowlingError(ValueError):
    """Raised for an illegal roll or a score asked for before the game ends."""


@dataclass
class GameConfig:
    seed: Optional[int] = None
    skill: int = 50  # 0..100, percent chance that every standing pin falls


@dataclass
class _Frame:
    """State and checks shared by both frame kinds.

    Rolls are the throws taken in this frame. Bonus entries are pins credited
    from throws recorded in later frames.
    """

    kind: ClassVar[str] = ""

    rolls: List[int] = field(default_factory=list)
    bonus: List[int] = field(default_factory=list)

    @staticmethod
    def within_pin_range(pins: int) -> bool:
        """Return True if a pin count fits on one rack."""
        return 0 <= pins <= PINS

    def append_roll(self, pins: int) -> None:
        self.rolls.append(pins)

    @property
    def number_of_rolls(self) -> int:
        return len(self.rolls)

    @property
    def first_roll(self) -> Optional[int]:
        return self.rolls[0] if self.rolls else None

    @property
    def second_roll(self) -> Optional[int]:
        return self.rolls[1] if self.number_of_rolls >= 2 else None

    def raw_score(self) -> int:
        return sum(self.rolls)

    def bonus_score(self) -> int:
        return sum(self.bonus)

    def is_strike(self) -> bool:
        return self.number_of_rolls >= 1 and self.first_roll == PINS

    def is_double_strike(self) -> bool:
        return self.number_of_rolls >= 2 and self.first_roll == PINS and self.second_roll == PINS

    def is_spare(self) -> bool:
        return (
            self.number_of_rolls >= 2
            and not self.is_strike()
            and self.first_roll + self.second_roll == PINS
        )


@dataclass
class RegularFrame(_Frame):
    """Frames one to nine: a strike ends the frame, otherwise two rolls."""

    kind: ClassVar[str] = "regular"

    def is_done(self) -> bool:
        return self.is_strike() or self.number_of_rolls == 2

    def legal_roll(self, pins: int) -> bool:
        """Return True if the pins can still stand in this frame.

        A second roll may only take down what the first one left.
        """
        if self.is_done() or not self.within_pin_range(pins):
            return False
        return self.within_pin_range(self.raw_score() + pins)

    def needs_bonus(self) -> bool:
        """Return True while a strike waits for two rolls or a spare for one."""
        return (self.is_strike() and len(self.bonus) < 2) or (
            self.is_spare() and len(self.bonus) < 1
        )


@dataclass
class FinalFrame(_Frame):
    """The tenth frame. Strikes and spares earn extra rolls inside the frame."""

    kind: ClassVar[str] = "final"

    def is_done(self) -> bool:
        if self.is_strike() or self.is_spare():
            return self.number_of_rolls == 3
        return self.number_of_rolls == 2

    def legal_roll(self, pins: int) -> bool:
        """Return True if the roll fits the tenth frame so far.

        After a strike or a spare the rack is reset, so the next throw is
        only bounded by a full rack. Otherwise it must fit what is standing.
        """
        if self.is_done() or not self.within_pin_range(pins):
            return False
        if self.number_of_rolls == 0:
            return True
        if self.number_of_rolls == 1:
            return self.is_strike() or self.within_pin_range(self.first_roll + pins)
        # Two rolls and not done: the first two were a strike or a spare
        return (
            self.is_spare()
            or self.is_double_strike()
            or self.within_pin_range(self.second_roll + pins)
        )

    def needs_bonus(self) -> bool:
        return False


Frame = Union[RegularFrame, FinalFrame]


class Round:
    """The ordered frames of one game.

    Each roll is offered as bonus to every earlier frame that still needs it,
    so bonuses are settled as the game goes instead of looked up at the end.
    """

    def __init__(self) -> None:
        self.frames: List[Frame] = [RegularFrame()]

    @property
    def current_frame(self) -> Frame:
        return self.frames[-1]

    @property
    def previous_frames(self) -> List[Frame]:
        return self.frames[:-1]

    def legal_roll(self, pins: int) -> bool:
        return self.current_frame.legal_roll(pins)

    def roll(self, pins: int) -> None:
        """Record a roll that the caller already checked with legal_roll."""
        frame = self.current_frame
        frame.append_roll(pins)
        logger.debug("frame %d rolled %d -> %s", len(self.frames), pins, frame.rolls)

        for position, earlier in enumerate(self.previous_frames, start=1):
            if earlier.needs_bonus():
                earlier.bonus.append(pins)
                logger.debug("frame %d bonus %s", position, earlier.bonus)

        if frame.is_done() and len(self.frames) < FRAMES:
            self.frames.append(self._new_empty_frame())
            logger.debug("advanced to frame %d", len(self.frames))

    def _new_empty_frame(self) -> Frame:
        if len(self.frames) == FRAMES - 1:
            return FinalFrame()
        return RegularFrame()

    def is_done(self) -> bool:
        if len(self.frames) != FRAMES:
            return False
        assert self.current_frame.kind == FinalFrame.kind
        return self.current_frame.is_done()

    def raw_score(self) -> int:
        return sum(frame.raw_score() for frame in self.frames)

    def bonus_score(self) -> int:
        return sum(frame.bonus_score() for frame in self.frames)

    def score(self) -> int:
        return self.raw_score() + self.bonus_score()

    def frame_totals(self) -> List[Optional[int]]:
        """Return the running total after each frame.

        A frame that is unfinished or still waiting for bonus pins has no total
        yet, and neither does any frame after it.
        """
        totals: List[Optional[int]] = [None] * FRAMES
        running = 0
        for index, frame in enumerate(self.frames):
            if not frame.is_done() or frame.needs_bonus():
                break
            running += frame.raw_score() + frame.bonus_score()
            totals[index] = running
        return totals


class Game:
    """Public entry for one game: rejects illegal calls before touching state."""

    def __init__(self) -> None:
        self.round = Round()

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self.round.frames)

    def is_done(self) -> bool:
        return self.round.is_done()

    def roll(self, pins: int) -> None:
        if not self.round.legal_roll(pins):
            logger.warning("rejected roll of %r pins in frame %d", pins, len(self.round.frames))
            raise BowlingError(f"illegal roll of {pins!r} pins in frame {len(self.round.frames)}")
        self.round.roll(pins)
        if self.round.is_done():
            logger.info("game complete, score %d", self.round.score())

    def score(self) -> int:
        if not self.round.is_done():
            logger.warning("score requested in frame %d before the game ended", len(self.round.frames))
            raise BowlingError("score is not available until all ten frames are complete")
        return self.round.score()


def create() -> Game:
    """Return a new game with one empty frame."""
    return Game()


def max_legal_roll(game: Game) -> int:
    """Return the most pins the next roll can take down, or -1 once over."""
    for pins in range(PINS, -1, -1):
        if game.round.legal_roll(pins):
            return pins
    return -1


def simulate_game(cfg: GameConfig) -> Generator[Tuple[str, Dict], None, None]:
    """Play a random game and yield simple events that describe progress.

    Every roll is legal for the frame it lands in. With skill percent chance
    all the standing pins fall, otherwise a uniform count of them does.
    """
    rng = random.Random(cfg.seed)
    skill = max(0, min(100, cfg.skill))
    game = Game()
    rolls: List[int] = []

    yield ("start", {"seed": cfg.seed, "skill": skill})

    while not game.is_done():
        position = len(game.round.frames)
        frame = game.round.current_frame
        standing = max_legal_roll(game)

        if rng.randint(0, 99) < skill:
            pins = standing
        else:
            pins = rng.randint(0, standing)

        game.roll(pins)
        rolls.append(pins)
        yield ("roll", {"frame": position, "pins": pins})

        if frame.is_done():
            yield (
                "frame",
                {"frame": position, "rolls": tuple(frame.rolls), "totals": game.round.frame_totals()},
            )

    yield ("game", {"score": game.score(), "rolls": tuple(rolls)})
