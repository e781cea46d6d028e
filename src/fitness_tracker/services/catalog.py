"""Food and activity catalog lookups."""

from dataclasses import dataclass
from typing import Protocol, TypeVar
from uuid import UUID

from fitness_tracker.domain.catalog import ActivityType, FoodItem

NamedItem = TypeVar("NamedItem", FoodItem, ActivityType)


class CatalogRepository(Protocol):
    """Persistence interface for the shared catalogs."""

    def list_foods(self) -> list[FoodItem]:
        """Return all foods ordered by name."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""

    def list_activities(self) -> list[ActivityType]:
        """Return all activities ordered by name."""

    def get_activity(self, activity_id: UUID) -> ActivityType | None:
        """Return an activity by id, if present."""


@dataclass
class CatalogService:
    """Service for searching foods and activities by name."""

    repository: CatalogRepository

    def search_foods(self, query: str | None = None) -> list[FoodItem]:
        """Return foods whose name contains the query, or all foods."""
        return _filter_by_name(self.repository.list_foods(), query)

    def search_activities(self, query: str | None = None) -> list[ActivityType]:
        """Return activities whose name contains the query, or all activities."""
        return _filter_by_name(self.repository.list_activities(), query)


def _filter_by_name(items: list[NamedItem], query: str | None) -> list[NamedItem]:
    if not query:
        return items
    needle = query.lower()
    return [item for item in items if needle in item.name.lower()]
