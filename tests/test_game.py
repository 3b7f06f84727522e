import logging

import pytest

from bowling.engine import BowlingError, FinalFrame, Game, RegularFrame, Round, create


def test_create_starts_with_one_empty_regular_frame():
    game = create()
    assert len(game.frames) == 1
    assert isinstance(game.frames[0], RegularFrame)
    assert game.frames[0].rolls == []


def test_perfect_game(game, roll_many):
    roll_many(game, [10] * 12)
    assert game.score() == 300


def test_all_gutter(game, roll_many):
    roll_many(game, [0] * 20)
    assert game.score() == 0


def test_all_spares(game, roll_many):
    roll_many(game, [5, 5] * 9 + [5, 5, 5])
    assert game.score() == 150


def test_single_spare_then_bonus(game, roll_many):
    roll_many(game, [5, 5, 3, 4] + [0] * 16)
    assert game.frames[0].raw_score() + game.frames[0].bonus_score() == 13
    assert game.frames[1].raw_score() == 7
    assert game.score() == 20


def test_open_frames(game, roll_many):
    roll_many(game, [4, 3] * 10)
    assert game.score() == 70


def test_illegal_roll_rejected_without_mutation(game):
    game.roll(5)
    with pytest.raises(BowlingError):
        game.roll(6)
    assert game.frames[0].raw_score() == 5
    assert game.frames[0].rolls == [5]
    game.roll(5)
    assert game.frames[0].rolls == [5, 5]


@pytest.mark.parametrize("pins", [-1, 11])
def test_out_of_range_roll_rejected(game, pins):
    with pytest.raises(BowlingError):
        game.roll(pins)
    assert game.frames[0].rolls == []


def test_score_rejected_before_ten_frames(game, roll_many):
    with pytest.raises(BowlingError):
        game.score()
    roll_many(game, [0] * 18)
    with pytest.raises(BowlingError):
        game.score()


def test_score_rejected_while_final_frame_open(game, roll_many):
    roll_many(game, [0] * 18 + [10, 10])
    assert len(game.frames) == 10
    with pytest.raises(BowlingError):
        game.score()
    game.roll(10)
    assert game.score() == 30


def test_final_frame_strike_extension(game, roll_many):
    roll_many(game, [0] * 18 + [10, 10, 10])
    final = game.frames[9]
    assert isinstance(final, FinalFrame)
    assert final.raw_score() == 30
    assert final.bonus == []
    assert game.frames[8].bonus == []
    assert game.score() == 30


def test_ninth_frame_strike_takes_first_two_final_rolls(game, roll_many):
    roll_many(game, [0, 0] * 8 + [10] + [10, 10, 10])
    assert game.frames[8].bonus == [10, 10]
    assert game.score() == 60


def test_final_frame_spare_earns_one_roll(game, roll_many):
    roll_many(game, [0] * 18 + [7, 3])
    assert not game.is_done()
    game.roll(10)
    assert game.score() == 20


def test_final_frame_strike_then_open_rolls_bounded(game, roll_many):
    roll_many(game, [0] * 18 + [10, 3])
    with pytest.raises(BowlingError):
        game.roll(8)
    game.roll(7)
    assert game.score() == 20


def test_open_final_frame_gets_no_third_roll(game, roll_many):
    roll_many(game, [0] * 18 + [3, 6])
    with pytest.raises(BowlingError):
        game.roll(0)
    assert game.score() == 9


def test_no_roll_after_game_over(game, roll_many):
    roll_many(game, [10] * 12)
    with pytest.raises(BowlingError):
        game.roll(0)
    assert game.score() == 300


def test_consecutive_strikes_share_one_bonus_roll(game, roll_many):
    roll_many(game, [10, 10, 4])
    assert game.frames[0].bonus == [10, 4]
    assert game.frames[1].bonus == [4]
    roll_many(game, [2])
    assert game.frames[1].bonus == [4, 2]
    assert game.frames[2].bonus == []


def test_round_frame_sequence_invariants(roll_many):
    game = roll_many(Game(), [10] * 12)
    frames = game.round.frames
    assert len(frames) == 10
    assert all(isinstance(f, RegularFrame) for f in frames[:9])
    assert isinstance(frames[9], FinalFrame)
    assert game.round.raw_score() == 120
    assert game.round.bonus_score() == 180


def test_round_previous_and_current_frames():
    rnd = Round()
    rnd.roll(10)
    rnd.roll(3)
    assert rnd.previous_frames == [rnd.frames[0]]
    assert rnd.current_frame.rolls == [3]
    assert rnd.legal_roll(7)
    assert not rnd.legal_roll(8)
    assert not rnd.is_done()


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([10] * 12, [30, 60, 90, 120, 150, 180, 210, 240, 270, 300]),
        ([9, 1] * 9 + [9, 1, 9], [19, 38, 57, 76, 95, 114, 133, 152, 171, 190]),
        ([0, 0] * 8 + [7, 3] + [10, 10, 10], [0, 0, 0, 0, 0, 0, 0, 0, 20, 50]),
        ([10, 7, 3, 7, 2] + [0, 0] * 7, [20, 37, 46, 46, 46, 46, 46, 46, 46, 46]),
    ],
)
def test_frame_totals_complete_games(game, roll_many, rolls, expected):
    roll_many(game, rolls)
    assert game.round.frame_totals() == expected
    assert game.score() == expected[-1]


def test_frame_totals_wait_for_bonus(game, roll_many):
    roll_many(game, [10, 3])
    assert game.round.frame_totals() == [None] * 10
    game.roll(4)
    assert game.round.frame_totals()[:3] == [17, 24, None]


def test_replaying_rolls_gives_same_score(roll_many):
    rolls = [10, 9, 1, 5, 5, 7, 2, 10, 10, 10, 9, 0, 8, 2, 9, 1, 10]
    first = roll_many(Game(), rolls).score()
    second = roll_many(Game(), rolls).score()
    assert first == second == 187


def test_rejected_roll_is_logged(game, caplog):
    with caplog.at_level(logging.WARNING, logger="bowling.engine"):
        with pytest.raises(BowlingError):
            game.roll(11)
    assert "rejected roll of 11 pins" in caplog.text
