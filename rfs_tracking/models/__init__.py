from .base import Base
from .scenario_choice import (
    CHOSEN_SCENARIO_COLUMN,
    DATE_COLUMN,
    HEADER,
    ScenarioChoice,
)

__all__ = [
    "Base",
    "ScenarioChoice",
    "HEADER",
    "DATE_COLUMN",
    "CHOSEN_SCENARIO_COLUMN",
]
