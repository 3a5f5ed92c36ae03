import pytest

from ltlr.score import MAX_SCORE, ScoreKeeper

DT = 1.0 / 60.0


def drain(keeper: ScoreKeeper, frames: int = 10000) -> None:
    for _ in range(frames):
        keeper.update(DT)
        if keeper.buffer == 0:
            break


def test_new_keeper_starts_empty():
    keeper = ScoreKeeper(DT)
    assert keeper.score == 0
    assert keeper.buffer == 0
    assert keeper.total_batteries == 0
    assert keeper.score_string == "000000"


def test_increment_goes_to_buffer_not_score():
    keeper = ScoreKeeper(DT)
    keeper.increment(100)
    assert keeper.buffer == 100
    assert keeper.score == 0


def test_increment_rejects_negative():
    keeper = ScoreKeeper(DT)
    with pytest.raises(ValueError):
        keeper.increment(-1)


def test_buffer_is_clamped_to_max_score():
    keeper = ScoreKeeper(DT)
    keeper.increment(MAX_SCORE)
    keeper.increment(MAX_SCORE)
    assert keeper.buffer == 999999


def test_update_waits_for_buffer_duration():
    keeper = ScoreKeeper(DT)
    keeper.increment(100)
    keeper.update(DT)
    assert keeper.score == 0
    assert keeper.buffer == 100
    keeper.update(DT)
    assert keeper.score > 0
    assert keeper.score + keeper.buffer == 100


def test_transfer_preserves_total_points():
    keeper = ScoreKeeper(DT)
    keeper.increment(1234)
    for _ in range(20):
        keeper.update(DT)
        assert keeper.score + keeper.buffer == 1234


def test_buffer_drains_fully_into_score():
    keeper = ScoreKeeper(DT)
    keeper.increment(250)
    drain(keeper)
    assert keeper.buffer == 0
    assert keeper.score == 250


def test_update_without_pending_points_does_nothing():
    keeper = ScoreKeeper(DT)
    for _ in range(10):
        keeper.update(DT)
    assert keeper.score == 0
    assert keeper.buffer_timer == 0.0


def test_score_is_clamped_to_max_score():
    keeper = ScoreKeeper(DT)
    keeper.increment(MAX_SCORE)
    drain(keeper)
    keeper.increment(500)
    drain(keeper)
    assert keeper.score == MAX_SCORE
    assert keeper.score_string == "999999"


def test_score_string_is_six_digits_matching_score():
    keeper = ScoreKeeper(DT)
    keeper.increment(4321)
    for _ in range(7):
        keeper.update(DT)
        assert len(keeper.score_string) == 6
        assert int(keeper.score_string) == keeper.score


def test_batteries_cap_at_three():
    keeper = ScoreKeeper(DT)
    for _ in range(5):
        keeper.collect_battery()
    assert keeper.total_batteries == 3


def test_consume_battery_never_goes_negative():
    keeper = ScoreKeeper(DT)
    keeper.consume_battery()
    assert keeper.total_batteries == 0
    keeper.collect_battery()
    keeper.collect_battery()
    keeper.consume_battery()
    assert keeper.total_batteries == 1


def test_reset_clears_everything():
    keeper = ScoreKeeper(DT)
    keeper.increment(300)
    drain(keeper, 5)
    keeper.collect_battery()
    keeper.reset()
    assert keeper.score == 0
    assert keeper.buffer == 0
    assert keeper.total_batteries == 0
    assert keeper.score_string == "000000"