"""
Penalty accumulator

Walks a round tally and sums fault penalties and time additions.
The first elimination or retirement ends the walk.
"""
from dataclasses import dataclass
from typing import Any, Optional, Union

from loguru import logger

from .classifier import RoundTally, TallyEntry
from .values import BLANK, Score, Verdict, is_blank, normalize_height


@dataclass(frozen=True)
class RoundOutcome:
    """Accumulated result of one round"""
    fault_penalty: Score
    time_addition: Union[int, float, str]
    is_eliminated: bool = False
    is_retired: bool = False

    @property
    def is_terminal(self) -> bool:
        return self.is_eliminated or self.is_retired


def entry_penalty(height: Union[int, float], entry: TallyEntry) -> Score:
    """Fault contribution of a single tally entry"""
    classification = entry.classification
    if classification.has_penalty_rule:
        return classification.fault_penalty(height, entry.count)
    if classification.is_eliminated:
        return Verdict.ELIMINATED
    if classification.is_retired:
        return Verdict.RETIRED
    if isinstance(classification.fault_penalty, Verdict):
        return classification.fault_penalty
    return classification.fault_penalty * entry.count


def accumulate_penalties(height: Any, tally: Optional[RoundTally]) -> Optional[RoundOutcome]:
    """
    Sum the penalties of a round.

    Args:
        height: fence height in cm, or the lead-line marker
        tally: output of classify_round

    Returns:
        RoundOutcome, or None when there is nothing to accumulate
    """
    if tally is None or len(tally) == 0:
        return None

    height = normalize_height(height)
    faults: Union[int, float] = 0
    time_addition: Union[int, float] = 0

    for entry in tally:
        penalty = entry_penalty(height, entry)

        if penalty == Verdict.ELIMINATED:
            logger.debug(f"Eliminated by {entry.type.value} (x{entry.count})")
            return RoundOutcome(Verdict.ELIMINATED, BLANK, is_eliminated=True)
        if penalty == Verdict.RETIRED:
            logger.debug(f"Retired by {entry.type.value}")
            return RoundOutcome(Verdict.RETIRED, BLANK, is_retired=True)

        time_penalty = entry.classification.time_penalty
        if time_penalty == Verdict.ELIMINATED:
            return RoundOutcome(Verdict.ELIMINATED, BLANK, is_eliminated=True)
        if time_penalty == Verdict.RETIRED:
            return RoundOutcome(Verdict.RETIRED, BLANK, is_retired=True)

        if not is_blank(penalty):
            faults += penalty
        # per entry, not per occurrence
        time_addition += time_penalty

    return RoundOutcome(faults, time_addition)
