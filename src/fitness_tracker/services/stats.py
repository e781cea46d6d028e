"""Per-day statistics for meals and activities."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.domain.stats import ActivityEntry, DailyTotals, MealEntry, Period

WINDOW_DAYS = frozenset(period.days for period in Period)


class StatsRepository(Protocol):
    """Persistence interface for meal and activity logs."""

    def list_meals(self, user_id: UUID, since: datetime) -> list[MealEntry]:
        """Return meals created at or after a timestamp."""

    def list_activities(self, user_id: UUID, since: datetime) -> list[ActivityEntry]:
        """Return activities created at or after a timestamp."""


@dataclass
class StatsService:
    """Service that fetches logs and builds charting series."""

    repository: StatsRepository

    def get_period(
        self,
        user_id: UUID,
        period: Period,
        reference_date: date | None = None,
    ) -> list[DailyTotals]:
        """Return one DailyTotals per day of the period ending at reference_date."""
        end = reference_date or datetime.now(tz=UTC).date()
        start = end - timedelta(days=period.days - 1)
        since = datetime(start.year, start.month, start.day, tzinfo=UTC)
        meals = self.repository.list_meals(user_id, since)
        activities = self.repository.list_activities(user_id, since)
        return aggregate_period(meals, activities, period.days, end)


def window_dates(window_days: int, reference_date: date) -> list[date]:
    """Return the ascending calendar days of a window ending at reference_date."""
    if window_days not in WINDOW_DAYS:
        raise InvalidInputError(
            f"Window must be one of {sorted(WINDOW_DAYS)} days, got {window_days}"
        )
    return [
        reference_date - timedelta(days=window_days - 1 - offset)
        for offset in range(window_days)
    ]


def aggregate_period(
    meals: Sequence[MealEntry],
    activities: Sequence[ActivityEntry],
    window_days: int,
    reference_date: date,
) -> list[DailyTotals]:
    """Sum meals and activities into zero-filled daily buckets.

    Entries are bucketed by the calendar date of ``created_at`` as recorded,
    without timezone conversion. Entries outside the window are ignored.
    Callers are expected to pass only the current user's entries.
    """
    days = window_dates(window_days, reference_date)
    consumed = dict.fromkeys(days, 0.0)
    burned = dict.fromkeys(days, 0.0)
    proteins = dict.fromkeys(days, 0.0)

    for meal in meals:
        calories = _require_amount(meal.total_calories, "total_calories")
        protein = _require_amount(
            meal.total_proteins_consumed, "total_proteins_consumed"
        )
        day = meal.created_at.date()
        if day in consumed:
            consumed[day] += calories
            proteins[day] += protein

    for activity in activities:
        calories = _require_amount(
            activity.total_calories_burned, "total_calories_burned"
        )
        day = activity.created_at.date()
        if day in burned:
            burned[day] += calories

    return [
        DailyTotals(
            day=day,
            calories_consumed=consumed[day],
            calories_burned=burned[day],
            protein_consumed=proteins[day],
        )
        for day in days
    ]


def _require_amount(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidInputError(f"{field_name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(f"{field_name} must be a non-negative number")
    return float(value)
