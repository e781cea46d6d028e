"""Supabase repository for new meal and activity rows."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_stats_repository import parse_created_at
from fitness_tracker.domain.catalog import MealType
from fitness_tracker.domain.stats import ActivityEntry, MealEntry
from fitness_tracker.services.entries import EntryRepository


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for meal and activity inserts."""

    client: Client

    def create_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        grams: float,
        total_calories: int,
        total_proteins: int,
        meal_type: MealType,
    ) -> MealEntry:
        """Insert a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "food_id": str(food_id),
                    "grams": grams,
                    "total_calories": total_calories,
                    "total_proteins_consumed": total_proteins,
                    "meal_type": meal_type.value,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        row = response.data[0]
        return MealEntry(
            user_id=user_id,
            total_calories=float(row.get("total_calories", total_calories)),
            total_proteins_consumed=float(
                row.get("total_proteins_consumed", total_proteins)
            ),
            created_at=parse_created_at(row.get("created_at")),
        )

    def create_activity(
        self,
        user_id: UUID,
        activity_id: UUID,
        duration_minutes: float,
        total_calories_burned: int,
    ) -> ActivityEntry:
        """Insert a user activity row and return it."""
        response = (
            self.client.table("user_activities")
            .insert(
                {
                    "user_id": str(user_id),
                    "activity_id": str(activity_id),
                    "duration_minutes": duration_minutes,
                    "total_calories_burned": total_calories_burned,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user activity")
        row = response.data[0]
        return ActivityEntry(
            user_id=user_id,
            total_calories_burned=float(
                row.get("total_calories_burned", total_calories_burned)
            ),
            created_at=parse_created_at(row.get("created_at")),
        )
