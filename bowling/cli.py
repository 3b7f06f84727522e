from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .engine import BowlingError, Game, GameConfig, simulate_game


def prompt_with_retries(prompt: str, validate: Callable[[str], bool], transform: Callable[[str], object] = lambda x: x, max_attempts: int = 10):
    """Ask for input with validation and a small retry budget.

    Returns the transformed value or exits on repeated invalid entries.
    """
    attempts = 0
    while attempts < max_attempts:
        try:
            raw = input(prompt).strip()
        except EOFError:
            print("Error: no input provided.")
            sys.exit(1)
        if validate(raw):
            return transform(raw)
        print("Invalid input. Please try again.")
        attempts += 1
    print("Multiple invalid attempts. Exiting.")
    sys.exit(1)


def is_valid_pins(s: str) -> bool:
    """Return True if a roll is a whole number from zero to ten."""
    return s.isdigit() and 0 <= int(s) <= 10


def is_valid_skill(value: int) -> bool:
    """Return True if skill is within zero to one hundred inclusive."""
    return 0 <= value <= 100


def play_rolls(game: Game, rolls: List[int]) -> None:
    """Feed rolls into the game and print a line for each one."""
    for pins in rolls:
        frame = len(game.frames)
        game.roll(pins)
        print(f"Frame {frame}: {pins} pins")


def play_interactive(game: Game) -> None:
    """Prompt for one roll at a time until the game is over.

    An illegal roll for the current frame is reported and asked again.
    """
    while not game.is_done():
        frame = len(game.frames)
        pins = prompt_with_retries(f"Frame {frame} roll: ", is_valid_pins, int)
        try:
            game.roll(pins)
        except BowlingError:
            print("Illegal roll for this frame. Please try again.")
            continue
        print(f"Frame {frame}: {pins} pins")


def main(argv=None) -> int:
    """Run the text mode interface for the bowling scorekeeper.

    Rolls come from the command line, from a simulated game, or from prompts.
    """
    parser = argparse.ArgumentParser(description="Ten-pin bowling scorekeeper (CLI)")
    parser.add_argument("rolls", nargs="*", type=int, help="Pins knocked down by each roll, in order")
    parser.add_argument("--random", dest="random_game", action="store_true", help="Play a simulated game")
    parser.add_argument("--seed", dest="seed", type=int, help="Random seed for reproducibility", default=None)
    parser.add_argument("--skill", dest="skill", type=int, default=50, help="Percent chance every standing pin falls (default 50)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each roll and bonus")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.random_game:
        if args.rolls:
            print("Invalid input. Rolls cannot be combined with --random.")
            return 2
        if not is_valid_skill(args.skill):
            print("Invalid input. Skill must be between 0 and 100.")
            return 2
        cfg = GameConfig(seed=args.seed, skill=args.skill)
        for event, data in simulate_game(cfg):
            if event == "roll":
                print(f"Frame {data['frame']}: {data['pins']} pins")
            elif event == "game":
                print(f"Final score: {data['score']}")
        return 0

    game = Game()
    if args.rolls:
        try:
            play_rolls(game, args.rolls)
        except BowlingError as exc:
            print(f"Invalid input. {exc}")
            return 2
    else:
        play_interactive(game)

    try:
        score = game.score()
    except BowlingError as exc:
        print(f"Invalid input. {exc}")
        return 2
    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
