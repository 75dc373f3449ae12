import pytest

from toboggan.config import DEFAULTS, DEFAULT_SLOPES, PART1_SLOPE, SurveyConfig, parse_slope, parse_slopes
from toboggan.engine.traverse import Slope
from toboggan.errors import InvalidSlopeError


def test_default_slope_set():
    assert [s.as_tuple() for s in DEFAULT_SLOPES] == [(1, 1), (1, 3), (1, 5), (1, 7), (2, 1)]
    assert DEFAULTS.active_slopes() == DEFAULT_SLOPES


def test_part1_rides_single_slope():
    cfg = SurveyConfig(part=1)
    assert cfg.active_slopes() == (PART1_SLOPE,) == (Slope(1, 3),)


def test_parse_slope():
    assert parse_slope("2,1") == Slope(2, 1)
    assert parse_slope(" 1 , 7 ") == Slope(1, 7)
    assert parse_slopes(["1,1", "2,1"]) == (Slope(1, 1), Slope(2, 1))


@pytest.mark.parametrize("text", ["0,3", "1", "1,2,3", "a,b", "1,-2", ""])
def test_parse_slope_rejects(text):
    with pytest.raises(InvalidSlopeError):
        parse_slope(text)
