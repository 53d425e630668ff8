"""
Class round input schemas

Pydantic models for a class's score sheet as loaded from JSON.
"""
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .exceptions import InvalidHeightError
from .speed import ArenaLocation
from .values import normalize_height

Cell = Union[str, int, float, None]


class CompetitorRound(BaseModel):
    """One competitor's marks and clock time"""
    competitor: str = Field(..., description="Rider / horse combination")
    marks: List[List[Cell]] = Field(default_factory=list, description="Per-fence marks, rows x columns")
    time_taken: Optional[Union[int, float]] = Field(None, description="Clock time in seconds")

    @field_validator("competitor")
    @classmethod
    def validate_competitor(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Competitor name is required")
        return v

    @field_validator("marks", mode="before")
    @classmethod
    def wrap_single_row(cls, v: Any) -> Any:
        # a flat list of fences is one row
        if isinstance(v, list) and v and not any(isinstance(row, list) for row in v):
            return [v]
        return v if v is not None else []

    @field_validator("time_taken", mode="before")
    @classmethod
    def blank_time(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ClassRound(BaseModel):
    """A class round: course details and every competitor's sheet"""
    name: str = Field(..., description="Class name")
    height: Union[int, float, str] = Field(..., description="Fence height in cm, or lead-line")
    arena: ArenaLocation = Field(default=ArenaLocation.OUTDOOR, description="Indoor / outdoor")
    course_length: Optional[float] = Field(None, gt=0, description="Course length in metres")
    time_allowed: Optional[Union[int, float]] = Field(None, description="Time allowed in seconds")
    time_penalty_period: Optional[Union[int, float]] = Field(None, description="Seconds per time penalty")
    time_penalty_amount: Optional[Union[int, float]] = Field(None, description="Penalty per started period")
    tie_break_by_time: bool = Field(default=False, description="Split equal penalties on time (jump-off)")
    competitors: List[CompetitorRound] = Field(default_factory=list)

    @field_validator("arena", mode="before")
    @classmethod
    def parse_arena(cls, v: Any) -> ArenaLocation:
        return ArenaLocation.from_string(v)

    @field_validator("time_allowed", "time_penalty_period")
    @classmethod
    def validate_positive(cls, v: Optional[Union[int, float]]) -> Optional[Union[int, float]]:
        if v is not None and v <= 0:
            raise ValueError(f"Must be positive: {v}")
        return v

    @field_validator("time_penalty_amount")
    @classmethod
    def validate_amount(cls, v: Optional[Union[int, float]]) -> Optional[Union[int, float]]:
        if v is not None and v < 0:
            raise ValueError(f"Cannot be negative: {v}")
        return v

    @field_validator("height")
    @classmethod
    def validate_height(cls, v: Union[int, float, str]) -> Union[int, float, str]:
        try:
            height = normalize_height(v)
        except InvalidHeightError as e:
            raise ValueError(str(e)) from e
        if height < 0:
            raise ValueError(f"Height cannot be negative: {v}")
        return v

    @model_validator(mode="after")
    def validate_timing(self) -> "ClassRound":
        if self.time_allowed is None and self.course_length is None:
            raise ValueError("Either time_allowed or course_length is required")
        return self
