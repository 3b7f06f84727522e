import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bowling.engine import Game  # noqa: E402


@pytest.fixture
def game():
    return Game()


@pytest.fixture
def roll_many():
    """Roll every pin count in order into a game and return it."""

    def _roll(game, rolls):
        for pins in rolls:
            game.roll(pins)
        return game

    return _roll
