"""
Show jumping scoring

Judge marks -> penalties -> round result -> class placings
"""
from .values import Verdict, BLANK, Score, is_blank, is_terminal, normalize_height, parse_score
from .exceptions import (
    ScoringError,
    ConfigurationError,
    UnknownMarkError,
    InvalidHeightError,
    HeightNotCoveredError,
    RoundScoringError,
)
from .classifications import (
    ClassificationRegistry,
    ClassificationType,
    PenaltyClassification,
    DEFAULT_CLASSIFICATIONS,
    default_registry,
    refusal_penalty,
)
from .classifier import RoundTally, TallyEntry, classify_round, flatten_marks
from .accumulator import RoundOutcome, accumulate_penalties
from .result import RoundResultRow, calculate_time_penalty, score_round
from .placings import compare_penalty, calculate_placings, calculate_placings_with_time, place
from .speed import ArenaLocation, speed_for, time_allowed
from .schemas import ClassRound, CompetitorRound
from .competition import ClassResult, PlacedResult, score_class
from .config import ScoringConfig, get_config

__all__ = [
    # Values
    "Verdict",
    "BLANK",
    "Score",
    "is_blank",
    "is_terminal",
    "normalize_height",
    "parse_score",
    # Errors
    "ScoringError",
    "ConfigurationError",
    "UnknownMarkError",
    "InvalidHeightError",
    "HeightNotCoveredError",
    "RoundScoringError",
    # Registry
    "ClassificationRegistry",
    "ClassificationType",
    "PenaltyClassification",
    "DEFAULT_CLASSIFICATIONS",
    "default_registry",
    "refusal_penalty",
    # Round scoring
    "RoundTally",
    "TallyEntry",
    "classify_round",
    "flatten_marks",
    "RoundOutcome",
    "accumulate_penalties",
    "RoundResultRow",
    "calculate_time_penalty",
    "score_round",
    # Placings
    "compare_penalty",
    "calculate_placings",
    "calculate_placings_with_time",
    "place",
    # Speed
    "ArenaLocation",
    "speed_for",
    "time_allowed",
    # Class scoring
    "ClassRound",
    "CompetitorRound",
    "ClassResult",
    "PlacedResult",
    "score_class",
    # Config
    "ScoringConfig",
    "get_config",
]
