"""
Course speeds and time allowed
"""
import math
from enum import Enum
from typing import Any, Tuple, Union

from .exceptions import HeightNotCoveredError
from .values import normalize_height


class ArenaLocation(str, Enum):
    """Arena location"""
    INDOOR = "indoor"
    OUTDOOR = "outdoor"

    @classmethod
    def from_string(cls, value: Any) -> "ArenaLocation":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for location in cls:
            if text == location.value:
                return location
        raise ValueError(f"Unknown arena location: {value!r} (indoor/outdoor)")


# (from cm, indoor m/min, outdoor m/min); each band runs up to the next
SPEED_TABLE: Tuple[Tuple[int, int, int], ...] = (
    (0, 300, 325),
    (80, 325, 350),
    (110, 350, 375),
    (140, 350, 400),
)

MAX_HEIGHT = 170


def speed_for(height: Any, arena: Union[ArenaLocation, str] = ArenaLocation.OUTDOOR) -> int:
    """Speed in metres/minute for a height band"""
    height = normalize_height(height)
    arena = ArenaLocation.from_string(arena)

    if height < 0 or height > MAX_HEIGHT:
        raise HeightNotCoveredError(height, arena.value)

    for low, indoor, outdoor in reversed(SPEED_TABLE):
        if height >= low:
            return indoor if arena == ArenaLocation.INDOOR else outdoor

    raise HeightNotCoveredError(height, arena.value)


def time_allowed(
    course_length: Union[int, float],
    height: Any,
    arena: Union[ArenaLocation, str] = ArenaLocation.OUTDOOR,
) -> int:
    """Time allowed in whole seconds, rounded up"""
    if course_length <= 0:
        raise ValueError(f"course_length must be positive: {course_length}")
    return math.ceil(course_length / speed_for(height, arena) * 60)
