"""
Result value types

Published result fields are a number, a terminal verdict (E / RET) or blank.
"""
from enum import Enum
from typing import Union, Any

from .exceptions import InvalidHeightError


class Verdict(str, Enum):
    """Terminal round verdict"""
    ELIMINATED = "E"
    RETIRED = "RET"

    def __str__(self) -> str:
        return self.value


# "no data entered"
BLANK = ""

Score = Union[int, float, Verdict, str]

# Lead-line classes are jumped over poles on the ground
LEAD_LINE_TOKENS = {"ll", "lead line", "lead-line", "leadline"}


def is_blank(value: Any) -> bool:
    """None, "" and whitespace-only strings count as blank"""
    if value is None:
        return True
    if isinstance(value, str) and not isinstance(value, Verdict):
        return value.strip() == ""
    return False


def is_terminal(value: Any) -> bool:
    return isinstance(value, Verdict)


def parse_score(value: Any) -> Score:
    """
    Coerce an externally supplied total (e.g. from a results sheet) into a Score.

    "E" / "RET" (any case) become verdicts, numeric strings become numbers.
    """
    if is_blank(value):
        return BLANK
    if isinstance(value, Verdict):
        return value
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    for verdict in Verdict:
        if text.upper() == verdict.value:
            return verdict
    number = float(text)
    return int(number) if number.is_integer() else number


def normalize_height(height: Any) -> Union[int, float]:
    """Fence height in cm; the lead-line marker maps to 0"""
    if isinstance(height, bool):
        raise InvalidHeightError(height)
    if isinstance(height, (int, float)):
        return height
    if isinstance(height, str):
        text = height.strip().lower()
        if text in LEAD_LINE_TOKENS:
            return 0
        try:
            number = float(text)
        except ValueError:
            raise InvalidHeightError(height) from None
        return int(number) if number.is_integer() else number
    raise InvalidHeightError(height)
