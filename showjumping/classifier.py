"""
Round classifier

Turns one competitor's score-sheet marks into a tally of classifications.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from loguru import logger

from .classifications import (
    ClassificationRegistry,
    ClassificationType,
    PenaltyClassification,
    default_registry,
    normalize_token,
)
from .exceptions import UnknownMarkError
from .values import is_blank

CLEAR_TOKEN = "/"

Grid = Sequence[Sequence[Any]]


@dataclass
class TallyEntry:
    """Occurrences of one classification within a round"""
    classification: PenaltyClassification
    count: int = 0

    @property
    def type(self) -> ClassificationType:
        return self.classification.type


class RoundTally:
    """Classification counts for one round, in first-seen order"""

    def __init__(self):
        self._entries: Dict[ClassificationType, TallyEntry] = {}

    def add(self, classification: PenaltyClassification, count: int = 1) -> TallyEntry:
        entry = self._entries.get(classification.type)
        if entry is None:
            entry = TallyEntry(classification)
            self._entries[classification.type] = entry
        entry.count += count
        return entry

    def count(self, classification_type: ClassificationType) -> int:
        entry = self._entries.get(classification_type)
        return entry.count if entry else 0

    def entries(self) -> List[TallyEntry]:
        return list(self._entries.values())

    def __iter__(self) -> Iterator[TallyEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, classification_type: ClassificationType) -> bool:
        return classification_type in self._entries

    def as_dict(self) -> Dict[str, int]:
        return {t.value: e.count for t, e in self._entries.items()}

    def __repr__(self) -> str:
        return f"RoundTally({self.as_dict()})"


def _cell_text(cell: Any) -> str:
    # spreadsheets hand back 4.0 for a typed "4"
    if isinstance(cell, float) and cell.is_integer():
        cell = int(cell)
    text = normalize_token(cell)
    # a lone "/" is coerced to 0 by the sheet
    if text == "0":
        return CLEAR_TOKEN
    return text


def iter_marks(grid: Optional[Grid]) -> Iterator[Tuple[str, Tuple[int, int]]]:
    """
    Yield (token, (row, column)) for every mark in the grid, row by row.

    Cells may hold several comma-separated marks, e.g. "4,R".
    """
    if not grid:
        return
    for r, row in enumerate(grid):
        if row is None:
            continue
        if isinstance(row, (str, int, float)):
            row = [row]
        for c, cell in enumerate(row):
            if isinstance(cell, bool):
                raise UnknownMarkError(str(cell), (r, c))
            if is_blank(cell):
                continue
            text = _cell_text(cell)
            for part in text.split(","):
                token = part.strip()
                if token:
                    yield token, (r, c)


def flatten_marks(grid: Optional[Grid]) -> List[str]:
    """All marks in the grid as a flat list of normalised tokens"""
    return [token for token, _ in iter_marks(grid)]


def classify_round(
    grid: Optional[Grid],
    registry: Optional[ClassificationRegistry] = None,
) -> Optional[RoundTally]:
    """
    Tally every mark in a round.

    Returns None when the grid holds no marks at all, which is distinct from
    a clear round (a tally holding only clears).
    Raises UnknownMarkError for a mark the registry does not know.
    """
    registry = registry or default_registry()
    tally = RoundTally()
    seen = 0

    for token, position in iter_marks(grid):
        classification = registry.lookup(token)
        if classification is None:
            raise UnknownMarkError(token, position)

        tally.add(classification)
        if classification.counts_as is not None:
            tally.add(registry.get(classification.counts_as))
        seen += 1

    if seen == 0:
        return None

    logger.debug(f"Round classified: {seen} marks -> {tally.as_dict()}")
    return tally
