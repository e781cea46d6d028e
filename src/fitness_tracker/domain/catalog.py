"""Domain models for the food and activity catalogs."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class MealType(Enum):
    """Meal slot chosen when logging a meal."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class FoodItem:
    """Food with nutrition per 100 grams."""

    id: UUID
    name: str
    calories_per_100g: float
    proteins_per_100g: float


@dataclass(frozen=True)
class ActivityType:
    """Physical activity with its hourly energy cost."""

    id: UUID
    name: str
    calories_per_hour: float
    category: str | None = None
