"""Supabase repository for the food and activity catalogs."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.catalog import ActivityType, FoodItem
from fitness_tracker.services.catalog import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase-backed catalog of foods and activities."""

    client: Client

    def list_foods(self) -> list[FoodItem]:
        """Return all foods ordered by name."""
        response = self.client.table("foods").select("*").order("name").execute()
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def list_activities(self) -> list[ActivityType]:
        """Return all activities ordered by name."""
        response = self.client.table("activities").select("*").order("name").execute()
        return [_parse_activity(row) for row in response.data or []]

    def get_activity(self, activity_id: UUID) -> ActivityType | None:
        """Return an activity by id, if present."""
        response = (
            self.client.table("activities")
            .select("*")
            .eq("id", str(activity_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_activity(response.data[0])


def _parse_food(row: dict[str, object]) -> FoodItem:
    return FoodItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        calories_per_100g=float(row.get("calories_per_100g") or 0.0),
        proteins_per_100g=float(row.get("proteins_per_100g") or 0.0),
    )


def _parse_activity(row: dict[str, object]) -> ActivityType:
    return ActivityType(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        calories_per_hour=float(row.get("calories_per_hour") or 0.0),
        category=row.get("category"),
    )
