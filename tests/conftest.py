"""
Pytest configuration and fixtures for show jumping scoring tests
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from showjumping.classifications import ClassificationRegistry
from showjumping.config import ScoringConfig


@pytest.fixture(scope="session")
def registry():
    """Default classification registry"""
    return ClassificationRegistry()


@pytest.fixture(scope="function")
def config():
    """Settings with the standard time penalty rules"""
    return ScoringConfig(time_penalty_period=4, time_penalty_amount=1, overtime_elimination_factor=2)


@pytest.fixture(scope="function")
def sample_class_data():
    """Sample 90cm class with one of each kind of round"""
    return {
        "name": "90cm Open",
        "height": 90,
        "arena": "outdoor",
        "time_allowed": 60,
        "competitors": [
            {"competitor": "Amy Clarke / Bluebell", "marks": [["/", "/", "/", "/"], ["/", "/", "/", "/"]], "time_taken": 55.2},
            {"competitor": "Ben Doyle / Rocket", "marks": [["/", "4", "/", "/"], ["/", "/", "/", "/"]], "time_taken": 52.0},
            {"competitor": "Cara Evans / Misty", "marks": [["/", "/", "R", "/"], ["/", "/", "/", "/"]], "time_taken": 58.4},
            {"competitor": "Dan Flynn / Toffee", "marks": [["/", "/", "/", "/"], ["/", "FH", "", ""]], "time_taken": 40.0},
            {"competitor": "Erin Gray / Pepper", "marks": [["/", "/", "RET", ""], ["", "", "", ""]], "time_taken": None},
            {"competitor": "Finn Hart / Dusty", "marks": [], "time_taken": None},
        ],
    }
