"""Domain models for meal and activity statistics."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class Period(Enum):
    """Charting window ending today."""

    WEEK = "week"
    MONTH = "month"

    @property
    def days(self) -> int:
        """Number of days covered by the window."""
        return 30 if self is Period.MONTH else 7


@dataclass(frozen=True)
class MealEntry:
    """Calories and protein recorded for one logged meal."""

    user_id: UUID
    total_calories: float
    total_proteins_consumed: float
    created_at: datetime


@dataclass(frozen=True)
class ActivityEntry:
    """Calories burned by one logged activity."""

    user_id: UUID
    total_calories_burned: float
    created_at: datetime


@dataclass(frozen=True)
class DailyTotals:
    """Per-day totals for charting."""

    day: date
    calories_consumed: float
    calories_burned: float
    protein_consumed: float

    @property
    def label(self) -> str:
        """Return the day formatted as DD/MM."""
        return self.day.strftime("%d/%m")
