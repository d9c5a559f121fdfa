from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Level(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Surface(str, Enum):
    TRACK = "track"
    TREADMILL = "treadmill"
    FIELD = "field"
    PAVEMENT = "pavement"
    OTHER = "other"


class Injury(str, Enum):
    NONE = "none"
    KNEES = "knees"
    HAMSTRINGS = "hamstrings"
    LOWER_BACK = "lower-back"
    OTHER = "other"


class PlanRequest(BaseModel):
    """Inputs for one sprint plan.

    Enum-like fields stay plain strings: values outside ``Level``, ``Surface``
    and ``Injury`` are accepted and fall back to the default tables.
    """

    age: int | float
    level: str = ""
    days: int | float = 0
    surface: str = ""
    injury: str = ""


class WeekPlan(BaseModel):
    week: int = Field(ge=1, le=6)
    sessions_per_week: int | float
    reps: int
    rpe: str
    rest_seconds: int = Field(ge=45)
    focus: str
    notes: str
