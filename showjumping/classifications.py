"""
Penalty classification registry

Maps the marks judges write on the score sheet to penalty classifications.
- Fixed fault/time penalties (knockdown = 4, rebuild = +6s)
- Function-valued penalties evaluated per round (refusals)
- Terminal classifications (elimination / retirement)

Built once at startup and shared read-only by every round.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Union

from loguru import logger

from .exceptions import ConfigurationError
from .values import BLANK, Score, Verdict


class ClassificationType(str, Enum):
    """Classification identity"""
    CLEAR = "clear"
    KNOCKDOWN = "knockdown"
    REFUSAL = "refusal"
    REFUSAL_REBUILD = "refusal_rebuild"
    FALL_OF_HORSE = "fall_of_horse"
    FALL_OF_RIDER = "fall_of_rider"
    TIME_EXCEEDED = "time_exceeded"
    ERROR_OF_COURSE = "error_of_course"
    OUTSIDE_ASSISTANCE = "outside_assistance"
    RETIRED = "retired"


PenaltyRule = Callable[[Union[int, float], int], Score]

# Above this height only one disobedience is permitted
DOUBLE_REFUSAL_MAX_HEIGHT = 115

REBUILD_TIME_PENALTY = 6


def refusal_penalty(height: Union[int, float], count: int) -> Score:
    """
    Total penalty for all refusals in a round.

    1 refusal = 4, 2 refusals = 12 up to 115cm, otherwise elimination.
    """
    if count <= 0:
        return BLANK
    if count == 1:
        return 4
    if count == 2 and height <= DOUBLE_REFUSAL_MAX_HEIGHT:
        return 12
    return Verdict.ELIMINATED


@dataclass(frozen=True)
class PenaltyClassification:
    """A penalty classification and the marks that select it"""
    type: ClassificationType
    description: str
    accepted_tokens: FrozenSet[str]
    fault_penalty: Union[int, float, Verdict, PenaltyRule] = 0
    time_penalty: Union[int, float, Verdict] = 0
    is_eliminated: bool = False
    is_retired: bool = False
    counts_as: Optional[ClassificationType] = None

    @property
    def is_terminal(self) -> bool:
        return self.is_eliminated or self.is_retired

    @property
    def has_penalty_rule(self) -> bool:
        return callable(self.fault_penalty)


def _tokens(*tokens: str) -> FrozenSet[str]:
    return frozenset(tokens)


DEFAULT_CLASSIFICATIONS = (
    PenaltyClassification(
        type=ClassificationType.CLEAR,
        description="Clear",
        accepted_tokens=_tokens("/", "."),
    ),
    PenaltyClassification(
        type=ClassificationType.KNOCKDOWN,
        description="Knockdown",
        accepted_tokens=_tokens("4", "4k", "k"),
        fault_penalty=4,
    ),
    PenaltyClassification(
        type=ClassificationType.REFUSAL,
        description="Refusal",
        accepted_tokens=_tokens("r", "4r", "8r"),
        fault_penalty=refusal_penalty,
    ),
    PenaltyClassification(
        type=ClassificationType.REFUSAL_REBUILD,
        description="Refusal with rebuild",
        accepted_tokens=_tokens("rb"),
        time_penalty=REBUILD_TIME_PENALTY,
        counts_as=ClassificationType.REFUSAL,
    ),
    PenaltyClassification(
        type=ClassificationType.FALL_OF_HORSE,
        description="Fall of horse",
        accepted_tokens=_tokens("fh"),
        fault_penalty=Verdict.ELIMINATED,
        is_eliminated=True,
    ),
    PenaltyClassification(
        type=ClassificationType.FALL_OF_RIDER,
        description="Fall of rider",
        accepted_tokens=_tokens("fr"),
        fault_penalty=Verdict.ELIMINATED,
        is_eliminated=True,
    ),
    PenaltyClassification(
        type=ClassificationType.TIME_EXCEEDED,
        description="Time limit exceeded",
        accepted_tokens=_tokens("t"),
        fault_penalty=Verdict.ELIMINATED,
        is_eliminated=True,
    ),
    PenaltyClassification(
        type=ClassificationType.ERROR_OF_COURSE,
        description="Error of course",
        accepted_tokens=_tokens("eoc"),
        fault_penalty=Verdict.ELIMINATED,
        is_eliminated=True,
    ),
    PenaltyClassification(
        type=ClassificationType.OUTSIDE_ASSISTANCE,
        description="Outside assistance",
        accepted_tokens=_tokens("a"),
        fault_penalty=Verdict.ELIMINATED,
        is_eliminated=True,
    ),
    PenaltyClassification(
        type=ClassificationType.RETIRED,
        description="Retired",
        accepted_tokens=_tokens("ret"),
        fault_penalty=Verdict.RETIRED,
        is_retired=True,
    ),
)


def normalize_token(token: str) -> str:
    return str(token).strip().lower()


class ClassificationRegistry:
    """
    Immutable token -> classification lookup

    Raises ConfigurationError on construction if a token is claimed twice
    or a counts_as target is missing or itself aliased.
    """

    def __init__(self, classifications: Iterable[PenaltyClassification] = DEFAULT_CLASSIFICATIONS):
        by_type: Dict[ClassificationType, PenaltyClassification] = {}
        by_token: Dict[str, PenaltyClassification] = {}

        for classification in classifications:
            if classification.type in by_type:
                raise ConfigurationError(f"Duplicate classification type: {classification.type.value}")
            by_type[classification.type] = classification

            for raw in classification.accepted_tokens:
                token = normalize_token(raw)
                if token in by_token:
                    raise ConfigurationError(
                        f"Token '{token}' is declared by both "
                        f"{by_token[token].type.value} and {classification.type.value}"
                    )
                by_token[token] = classification

        for classification in by_type.values():
            if classification.counts_as is None:
                continue
            target = by_type.get(classification.counts_as)
            if target is None:
                raise ConfigurationError(
                    f"{classification.type.value} counts as unknown classification "
                    f"{classification.counts_as.value}"
                )
            # aliases are one level deep
            if target.counts_as is not None:
                raise ConfigurationError(
                    f"{classification.type.value} counts as {target.type.value}, "
                    f"which is itself an alias"
                )

        self._by_type: Mapping[ClassificationType, PenaltyClassification] = MappingProxyType(by_type)
        self._by_token: Mapping[str, PenaltyClassification] = MappingProxyType(by_token)
        logger.debug(f"Classification registry built: {len(by_type)} classifications, {len(by_token)} tokens")

    def lookup(self, token: str) -> Optional[PenaltyClassification]:
        """Case-insensitive, whitespace-trimmed token lookup; None if not found"""
        return self._by_token.get(normalize_token(token))

    def get(self, classification_type: ClassificationType) -> PenaltyClassification:
        return self._by_type[classification_type]

    @property
    def classifications(self) -> Mapping[ClassificationType, PenaltyClassification]:
        return self._by_type

    @property
    def tokens(self) -> FrozenSet[str]:
        return frozenset(self._by_token)

    def __contains__(self, token: str) -> bool:
        return normalize_token(token) in self._by_token


_default_registry: Optional[ClassificationRegistry] = None


def default_registry() -> ClassificationRegistry:
    """Shared registry over DEFAULT_CLASSIFICATIONS"""
    global _default_registry
    if _default_registry is None:
        _default_registry = ClassificationRegistry()
    return _default_registry
