"""
Scoring settings
"""
from functools import lru_cache
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

load_dotenv()


class ScoringConfig(BaseSettings):
    """Scoring settings (environment / .env overridable)"""

    # time penalties
    time_penalty_period: Union[int, float] = Field(default=4, description="Seconds per time penalty")
    time_penalty_amount: Union[int, float] = Field(default=1, description="Penalty per started period")
    overtime_elimination_factor: Union[int, float] = Field(default=2, description="Eliminated beyond this multiple of time allowed")

    # logging
    log_level: str = Field(default="INFO", description="Console log level")
    log_dir: Optional[str] = Field(default=None, description="Directory for rotating log files")

    @field_validator("time_penalty_period", "overtime_elimination_factor")
    @classmethod
    def validate_positive(cls, v):
        if v <= 0:
            raise ValueError(f"Must be positive: {v}")
        return v

    @field_validator("time_penalty_amount")
    @classmethod
    def validate_amount(cls, v):
        if v < 0:
            raise ValueError(f"Cannot be negative: {v}")
        return v

    class Config:
        env_prefix = "SHOWJUMPING_"
        case_sensitive = False


@lru_cache()
def get_config() -> ScoringConfig:
    return ScoringConfig()
