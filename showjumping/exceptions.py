"""
Scoring errors

Every error names the offending value so the judge can correct the sheet.
Nothing here is retried: scoring is pure, the same input fails the same way.
"""
from typing import Any, Optional, Tuple


class ScoringError(Exception):
    """Base class for all scoring errors"""


class ConfigurationError(ScoringError):
    """Classification registry is inconsistent"""


class UnknownMarkError(ScoringError):
    """A judge mark that maps to no classification"""

    def __init__(self, token: str, position: Optional[Tuple[int, int]] = None):
        self.token = token
        self.position = position
        where = f" at row {position[0] + 1}, column {position[1] + 1}" if position else ""
        super().__init__(f"Unrecognised mark '{token}'{where}")


class InvalidHeightError(ScoringError):
    """Height is neither a number nor the lead-line marker"""

    def __init__(self, height: Any):
        self.height = height
        super().__init__(f"Invalid fence height: {height!r}")


class HeightNotCoveredError(ScoringError):
    """Height falls outside every row of the speed table"""

    def __init__(self, height: Any, arena: Any):
        self.height = height
        self.arena = arena
        super().__init__(f"No speed defined for height {height} ({arena})")


class RoundScoringError(ScoringError):
    """A competitor's round could not be scored"""

    def __init__(self, class_name: str, competitor: str, cause: ScoringError):
        self.class_name = class_name
        self.competitor = competitor
        self.cause = cause
        super().__init__(f"[{class_name}] {competitor}: {cause}")
