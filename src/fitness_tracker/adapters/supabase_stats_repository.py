"""Supabase repository for meal and activity statistics."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.stats import ActivityEntry, MealEntry
from fitness_tracker.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for stats queries."""

    client: Client

    def list_meals(self, user_id: UUID, since: datetime) -> list[MealEntry]:
        """Return meals created since a timestamp."""
        response = (
            self.client.table("meals")
            .select("user_id, total_calories, total_proteins_consumed, created_at")
            .eq("user_id", str(user_id))
            .gte("created_at", since.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def list_activities(self, user_id: UUID, since: datetime) -> list[ActivityEntry]:
        """Return user activities created since a timestamp."""
        response = (
            self.client.table("user_activities")
            .select("user_id, total_calories_burned, created_at")
            .eq("user_id", str(user_id))
            .gte("created_at", since.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]


def parse_created_at(raw: object) -> datetime:
    """Parse a Supabase timestamp, keeping its recorded offset."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return datetime.min


def _parse_meal(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        user_id=UUID(str(row["user_id"])),
        total_calories=float(row.get("total_calories") or 0.0),
        total_proteins_consumed=float(row.get("total_proteins_consumed") or 0.0),
        created_at=parse_created_at(row.get("created_at")),
    )


def _parse_activity(row: dict[str, object]) -> ActivityEntry:
    return ActivityEntry(
        user_id=UUID(str(row["user_id"])),
        total_calories_burned=float(row.get("total_calories_burned") or 0.0),
        created_at=parse_created_at(row.get("created_at")),
    )
