"""
Class scoring

Scores every competitor in a class round and places them.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from .classifications import ClassificationRegistry, default_registry
from .config import ScoringConfig, get_config
from .exceptions import RoundScoringError, ScoringError
from .placings import calculate_placings, calculate_placings_with_time
from .result import RoundResultRow, score_round
from .schemas import ClassRound
from .speed import time_allowed as derive_time_allowed


@dataclass
class PlacedResult:
    """A competitor's published row and placing"""
    competitor: str
    row: RoundResultRow
    placing: str = ""

    @property
    def position(self) -> Optional[int]:
        """Numeric placing, None when unplaced"""
        if not self.placing:
            return None
        return int(self.placing.rstrip("="))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "competitor": self.competitor,
            **self.row.to_dict(),
            "placing": self.placing,
        }


@dataclass
class ClassResult:
    """Scored and placed class round"""
    name: str
    time_allowed: Union[int, float]
    tie_break_by_time: bool = False
    results: List[PlacedResult] = field(default_factory=list)

    def standings(self) -> List[PlacedResult]:
        """Results by placing; unplaced last, running order kept among equals"""
        return sorted(
            self.results,
            key=lambda r: (r.position is None, r.position or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "time_allowed": self.time_allowed,
            "tie_break_by_time": self.tie_break_by_time,
            "results": [r.to_dict() for r in self.results],
        }


def resolve_time_allowed(class_round: ClassRound) -> Union[int, float]:
    """Explicit time allowed, otherwise derived from course length and speed"""
    if class_round.time_allowed is not None:
        return class_round.time_allowed
    return derive_time_allowed(class_round.course_length, class_round.height, class_round.arena)


def score_class(
    class_round: Union[ClassRound, Dict[str, Any]],
    registry: Optional[ClassificationRegistry] = None,
    config: Optional[ScoringConfig] = None,
) -> ClassResult:
    """
    Score and place a whole class round.

    Args:
        class_round: ClassRound or its dict form
        registry: classification registry (shared default if omitted)
        config: scoring settings (environment settings if omitted)

    Returns:
        ClassResult with one PlacedResult per competitor in running order

    Raises:
        RoundScoringError: a competitor's sheet could not be scored
    """
    if isinstance(class_round, dict):
        class_round = ClassRound.model_validate(class_round)
    registry = registry or default_registry()
    config = config or get_config()

    period = class_round.time_penalty_period or config.time_penalty_period
    amount = class_round.time_penalty_amount
    if amount is None:
        amount = config.time_penalty_amount

    try:
        allowed = resolve_time_allowed(class_round)
    except ScoringError as e:
        logger.error(f"[{class_round.name}] time allowed unavailable: {e}")
        raise

    logger.info(f"Scoring {class_round.name}: {len(class_round.competitors)} competitors, time allowed {allowed}s")

    rows: List[RoundResultRow] = []
    for entry in class_round.competitors:
        try:
            row = score_round(
                class_round.height,
                allowed,
                entry.marks,
                entry.time_taken,
                time_penalty_period=period,
                time_penalty_amount=amount,
                registry=registry,
                overtime_factor=config.overtime_elimination_factor,
            )
        except ScoringError as e:
            logger.error(f"[{class_round.name}] {entry.competitor}: {e}")
            raise RoundScoringError(class_round.name, entry.competitor, e) from e

        if row.is_blank:
            logger.warning(f"[{class_round.name}] {entry.competitor}: no marks entered")
        rows.append(row)

    totals = [row.total_penalty for row in rows]
    if class_round.tie_break_by_time:
        placings = calculate_placings_with_time(totals, [row.time_including_rebuild for row in rows])
    else:
        placings = calculate_placings(totals)

    result = ClassResult(
        name=class_round.name,
        time_allowed=allowed,
        tie_break_by_time=class_round.tie_break_by_time,
        results=[
            PlacedResult(entry.competitor, row, placing)
            for entry, row, placing in zip(class_round.competitors, rows, placings)
        ],
    )

    placed = sum(1 for r in result.results if r.placing)
    logger.info(f"{class_round.name} scored: {placed}/{len(rows)} placed")
    return result
