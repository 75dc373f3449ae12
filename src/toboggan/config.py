from dataclasses import dataclass
from typing import Iterable, Tuple

from .engine.traverse import Slope
from .errors import InvalidSlopeError

# Canonical survey set, (down, right).
DEFAULT_SLOPES: Tuple[Slope, ...] = (
    Slope(1, 1),
    Slope(1, 3),
    Slope(1, 5),
    Slope(1, 7),
    Slope(2, 1),
)

# Part 1 only rides the single 3-right/1-down slope.
PART1_SLOPE = Slope(1, 3)


@dataclass(frozen=True)
class SurveyConfig:
    slopes: Tuple[Slope, ...] = DEFAULT_SLOPES
    part: int = 2

    def active_slopes(self) -> Tuple[Slope, ...]:
        if self.part == 1:
            return (PART1_SLOPE,)
        return self.slopes


def parse_slope(text: str) -> Slope:
    """Parse "DOWN,RIGHT" (e.g. "2,1") into a validated Slope."""
    parts = text.split(",")
    if len(parts) != 2:
        raise InvalidSlopeError(f"expected DOWN,RIGHT, got {text!r}")
    try:
        down, right = (int(p.strip()) for p in parts)
    except ValueError:
        raise InvalidSlopeError(f"expected two integers, got {text!r}") from None
    return Slope(down, right).validate()


def parse_slopes(texts: Iterable[str]) -> Tuple[Slope, ...]:
    return tuple(parse_slope(t) for t in texts)


DEFAULTS = SurveyConfig()
