"""
Placement ranker

Places competitors in a class by total penalty, optionally breaking
ties on time. Eliminated and retired competitors always place last
(retired behind eliminated) and are never separated by time.
"""
from typing import Any, List, Optional, Sequence, Tuple, Union

from .values import Verdict, is_blank, parse_score

ELIMINATED_RANK_VALUE = 10000
RETIRED_RANK_VALUE = 20000

TIE_MARK = "="


def penalty_rank_value(total: Any) -> Union[int, float]:
    """Numeric stand-in for a total penalty when ordering"""
    total = parse_score(total)
    if total == Verdict.ELIMINATED:
        return ELIMINATED_RANK_VALUE
    if total == Verdict.RETIRED:
        return RETIRED_RANK_VALUE
    return total


def compare_penalty(a: Any, b: Any) -> int:
    """Negative if a places ahead of b, 0 if level, positive if behind"""
    va, vb = penalty_rank_value(a), penalty_rank_value(b)
    return (va > vb) - (va < vb)


def _reference_order(totals: Sequence[Any]) -> List[Union[int, float]]:
    return sorted(penalty_rank_value(t) for t in totals if not is_blank(t))


def _base_position(value: Union[int, float], reference: List[Union[int, float]]) -> Tuple[int, bool]:
    first = reference.index(value)
    tied = first + 1 < len(reference) and reference[first + 1] == value
    return first + 1, tied


def calculate_placings(totals: Sequence[Any]) -> List[str]:
    """
    Place a class on total penalty alone.

    Args:
        totals: total penalty per competitor, in running order

    Returns:
        Placing per competitor in the same order: "", "3" or "3=" when shared

    Example:
        [0, 4, 4, "E"] -> ["1", "2=", "2=", "4"]
    """
    reference = _reference_order(totals)
    placings = []

    for total in totals:
        if is_blank(total):
            placings.append("")
            continue
        position, tied = _base_position(penalty_rank_value(total), reference)
        placings.append(f"{position}{TIE_MARK if tied else ''}")

    return placings


def _time_value(time: Any) -> Optional[float]:
    if is_blank(time) or isinstance(time, Verdict):
        return None
    return float(time)


def _is_faster(other: Optional[float], mine: Optional[float]) -> bool:
    # a missing time is slower than any recorded one
    if other is None:
        return False
    if mine is None:
        return True
    return other < mine


def calculate_placings_with_time(totals: Sequence[Any], times: Sequence[Any]) -> List[str]:
    """
    Place a class on total penalty, splitting equal totals on time.

    Competitors level on penalties are ordered by time; an exact time
    tie shares the placing. Eliminated/retired totals are not split.

    Args:
        totals: total penalty per competitor
        times: time (incl. rebuild additions) per competitor, aligned with totals

    Example:
        totals [4, 4, 4], times [30, 28, 30] -> ["2=", "1", "2="]
    """
    if len(totals) != len(times):
        raise ValueError(f"totals ({len(totals)}) and times ({len(times)}) differ in length")

    reference = _reference_order(totals)
    values = [None if is_blank(t) else penalty_rank_value(t) for t in totals]
    placings = []

    for i, value in enumerate(values):
        if value is None:
            placings.append("")
            continue

        position, tied = _base_position(value, reference)
        if not tied:
            placings.append(str(position))
            continue
        if value in (ELIMINATED_RANK_VALUE, RETIRED_RANK_VALUE):
            placings.append(f"{position}{TIE_MARK}")
            continue

        mine = _time_value(times[i])
        ahead = 0
        shared = False
        for j, other_value in enumerate(values):
            if j == i or other_value != value:
                continue
            other = _time_value(times[j])
            if _is_faster(other, mine):
                ahead += 1
            elif other == mine:
                shared = True

        placings.append(f"{position + ahead}{TIE_MARK if shared else ''}")

    return placings


def place(totals: Sequence[Any], times: Optional[Sequence[Any]] = None) -> List[str]:
    """calculate_placings, or calculate_placings_with_time when times are given"""
    if times is None:
        return calculate_placings(totals)
    return calculate_placings_with_time(totals, times)
