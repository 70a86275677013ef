import math

import pytest

from amuse.services.durations import percent, to_duration_human
from amuse.services.snapshot import build_query


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (65, "1:05"),
        (0, "0:00"),
        (3600, "60:00"),
        (59, "0:59"),
        (130, "2:10"),
    ],
)
def test_to_duration_human(seconds, expected):
    assert to_duration_human(seconds) == expected


def test_percent_is_plain_fraction():
    assert percent(65, 130) == 0.5
    assert percent(0, 130) == 0.0


def test_percent_of_zero_duration_is_not_finite():
    assert math.isnan(percent(0, 0))
    assert percent(5, 0) == math.inf
    assert percent(-5, 0) == -math.inf


def test_percent_past_end_is_not_clamped():
    assert percent(200, 100) == 2.0


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (65.0, "1:05"),
        (130.0, "2:10"),
        (0.0, "0:00"),
        (3600.0, "60:00"),
    ],
)
def test_whole_float_seconds_format_like_ints(seconds, expected):
    assert to_duration_human(seconds) == expected


def test_whole_float_state_end_to_end(player_state):
    player_state["progress"] = 65.0
    player_state["currentTrackDuration"] = 130.0

    query = build_query(player_state)

    assert query.player.seekbar_current_position_human == "1:05"
    assert query.track.duration_human == "2:10"
