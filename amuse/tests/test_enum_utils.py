import pytest

from amuse.models.enum_utils import normalize_repeat_mode
from amuse.models.enums import LikeStatus, RepeatType


@pytest.mark.parametrize(
    "token, expected",
    [
        ("on", RepeatType.ONE),
        ("all", RepeatType.ALL),
        ("off", RepeatType.NONE),
        (None, RepeatType.NONE),
        ("shuffle", RepeatType.NONE),
        ("ON", RepeatType.NONE),
        (1, RepeatType.NONE),
    ],
)
def test_normalize_repeat_mode(token, expected):
    assert normalize_repeat_mode(token) is expected


def test_repeat_type_wire_values():
    assert [r.value for r in RepeatType] == ["NONE", "ALL", "ONE"]


def test_like_status_wire_values():
    assert [s.value for s in LikeStatus] == ["INDIFFERENT", "LIKE", "DISLIKE"]
