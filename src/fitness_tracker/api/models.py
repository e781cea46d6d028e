"""Pydantic models for API request payloads."""

from uuid import UUID

from pydantic import BaseModel, Field

from fitness_tracker.domain.catalog import MealType
from fitness_tracker.domain.profile import Gender, Goal


class ProfileUpdate(BaseModel):
    """Body metrics edited on the profile screen."""

    height_cm: float | None = Field(default=None, gt=0)
    weight_kg: float | None = Field(default=None, gt=0)
    goal: Goal | None = None
    gender: Gender | None = None


class MealCreate(BaseModel):
    """Meal logged from the food catalog."""

    food_id: UUID
    grams: float = Field(gt=0)
    meal_type: MealType = MealType.BREAKFAST


class ActivityCreate(BaseModel):
    """Activity logged from the activity catalog."""

    activity_id: UUID
    duration_minutes: float = Field(gt=0)
