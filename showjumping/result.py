"""
Round result assembler

Combines the accumulated penalties with the round timing into the four
published figures: time incl. rebuild, time penalty, jump penalty, total.
"""
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from loguru import logger

from .accumulator import accumulate_penalties
from .classifications import ClassificationRegistry
from .classifier import Grid, classify_round
from .values import BLANK, Score, Verdict, is_blank

DEFAULT_TIME_PENALTY_PERIOD = 4
DEFAULT_TIME_PENALTY_AMOUNT = 1
OVERTIME_ELIMINATION_FACTOR = 2


@dataclass(frozen=True)
class RoundResultRow:
    """Published result of one competitor's round"""
    time_including_rebuild: Score = BLANK
    time_penalty: Score = BLANK
    jump_penalty: Score = BLANK
    total_penalty: Score = BLANK

    @property
    def is_blank(self) -> bool:
        return all(is_blank(v) for v in asdict(self).values())

    @property
    def is_eliminated(self) -> bool:
        return self.total_penalty == Verdict.ELIMINATED

    @property
    def is_retired(self) -> bool:
        return self.total_penalty == Verdict.RETIRED

    def to_dict(self) -> Dict[str, Any]:
        return {k: (v.value if isinstance(v, Verdict) else v) for k, v in asdict(self).items()}


BLANK_ROW = RoundResultRow()
ELIMINATED_ROW = RoundResultRow(total_penalty=Verdict.ELIMINATED)
RETIRED_ROW = RoundResultRow(total_penalty=Verdict.RETIRED)


def calculate_time_penalty(
    time_including_rebuild: Union[int, float],
    time_allowed: Union[int, float],
    period: Union[int, float] = DEFAULT_TIME_PENALTY_PERIOD,
    amount: Union[int, float] = DEFAULT_TIME_PENALTY_AMOUNT,
) -> Union[int, float]:
    """Penalty for every started period over the time allowed"""
    # clock times are recorded to 1/100s
    seconds_over = round(max(0, time_including_rebuild - time_allowed), 2)
    return math.ceil(seconds_over / period) * amount


def score_round(
    height: Any,
    time_allowed: Union[int, float],
    marks: Optional[Grid],
    time_taken: Optional[Union[int, float, str]],
    time_penalty_period: Union[int, float] = DEFAULT_TIME_PENALTY_PERIOD,
    time_penalty_amount: Union[int, float] = DEFAULT_TIME_PENALTY_AMOUNT,
    registry: Optional[ClassificationRegistry] = None,
    overtime_factor: Union[int, float] = OVERTIME_ELIMINATION_FACTOR,
) -> RoundResultRow:
    """
    Score one competitor's round.

    Args:
        height: fence height in cm, or the lead-line marker
        time_allowed: seconds
        marks: per-fence judge marks (rows x columns)
        time_taken: seconds on the clock; blank if not yet entered
        time_penalty_period: seconds per time penalty
        time_penalty_amount: penalty per started period
        registry: classification registry (shared default if omitted)
        overtime_factor: elimination once the round takes this multiple of time allowed

    Returns:
        RoundResultRow; all blank when no marks were entered
    """
    if time_penalty_period <= 0:
        raise ValueError(f"time_penalty_period must be positive: {time_penalty_period}")

    tally = classify_round(marks, registry)
    outcome = accumulate_penalties(height, tally)

    if outcome is None:
        return BLANK_ROW
    if outcome.is_eliminated:
        return ELIMINATED_ROW
    if outcome.is_retired:
        return RETIRED_ROW

    if is_blank(time_taken):
        logger.warning("Round has marks but no time recorded")
        return RoundResultRow(jump_penalty=outcome.fault_penalty)

    time_including_rebuild = round(float(time_taken) + outcome.time_addition, 2)
    if time_including_rebuild.is_integer():
        time_including_rebuild = int(time_including_rebuild)

    if time_including_rebuild > overtime_factor * time_allowed:
        logger.debug(f"Eliminated on time: {time_including_rebuild}s > {overtime_factor} x {time_allowed}s")
        return ELIMINATED_ROW

    time_penalty = calculate_time_penalty(
        time_including_rebuild, time_allowed, time_penalty_period, time_penalty_amount
    )
    return RoundResultRow(
        time_including_rebuild=time_including_rebuild,
        time_penalty=time_penalty,
        jump_penalty=outcome.fault_penalty,
        total_penalty=time_penalty + outcome.fault_penalty,
    )
