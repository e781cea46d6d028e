"""Meal and activity logging service."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.catalog import ActivityType, FoodItem, MealType
from fitness_tracker.domain.errors import InvalidInputError, NotFoundError
from fitness_tracker.domain.stats import ActivityEntry, MealEntry
from fitness_tracker.services.catalog import CatalogRepository
from fitness_tracker.services.needs import round_half_up
from fitness_tracker.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)

CALORIES_PER_LEVEL = 5000


class EntryRepository(Protocol):
    """Persistence interface for new meal and activity rows."""

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

    def create_activity(
        self,
        user_id: UUID,
        activity_id: UUID,
        duration_minutes: float,
        total_calories_burned: int,
    ) -> ActivityEntry:
        """Insert a user activity row and return it."""


def meal_totals(food: FoodItem, grams: float) -> tuple[int, int]:
    """Return (calories, proteins) for a portion of food."""
    calories = round_half_up(food.calories_per_100g * grams / 100)
    proteins = round_half_up(food.proteins_per_100g * grams / 100)
    return calories, proteins


def calories_burned(activity: ActivityType, duration_minutes: float) -> int:
    """Return calories burned for a duration of an activity."""
    return round_half_up(activity.calories_per_hour * duration_minutes / 60)


def hero_level_for(total_calories_burned: float) -> int:
    """Return the hero level earned by a lifetime calorie burn."""
    return math.floor(total_calories_burned / CALORIES_PER_LEVEL) + 1


@dataclass
class EntryLogService:
    """Service that records meals and activities and updates profile totals."""

    repository: EntryRepository
    catalog_repository: CatalogRepository
    profile_repository: ProfileRepository

    def log_meal(
        self,
        user_id: UUID,
        food_id: UUID,
        grams: float,
        meal_type: MealType = MealType.BREAKFAST,
    ) -> MealEntry:
        """Record a meal and add it to the profile's running totals."""
        if not math.isfinite(grams) or grams <= 0:
            raise InvalidInputError("grams must be a positive number")
        food = self.catalog_repository.get_food(food_id)
        if food is None:
            raise NotFoundError(f"Food {food_id} not found")

        total_calories, total_proteins = meal_totals(food, grams)
        entry = self.repository.create_meal(
            user_id=user_id,
            food_id=food_id,
            grams=grams,
            total_calories=total_calories,
            total_proteins=total_proteins,
            meal_type=meal_type,
        )
        _logger.info(
            "Meal logged: user_id=%s food=%s calories=%s",
            user_id,
            food.name,
            total_calories,
        )

        profile = self.profile_repository.get_profile(user_id)
        if profile:
            self.profile_repository.update_totals(
                user_id,
                {
                    "total_calories_consumed": profile.total_calories_consumed
                    + total_calories,
                    "total_proteins_consumed": profile.total_proteins_consumed
                    + total_proteins,
                },
            )
        return entry

    def log_activity(
        self, user_id: UUID, activity_id: UUID, duration_minutes: float
    ) -> ActivityEntry:
        """Record an activity, add its burn to the profile and level up."""
        if not math.isfinite(duration_minutes) or duration_minutes <= 0:
            raise InvalidInputError("duration_minutes must be a positive number")
        activity = self.catalog_repository.get_activity(activity_id)
        if activity is None:
            raise NotFoundError(f"Activity {activity_id} not found")

        burned = calories_burned(activity, duration_minutes)
        entry = self.repository.create_activity(
            user_id=user_id,
            activity_id=activity_id,
            duration_minutes=duration_minutes,
            total_calories_burned=burned,
        )
        _logger.info(
            "Activity logged: user_id=%s activity=%s burned=%s",
            user_id,
            activity.name,
            burned,
        )

        profile = self.profile_repository.get_profile(user_id)
        if profile:
            new_total = profile.total_calories_burned + burned
            new_level = max(profile.hero_level, hero_level_for(new_total))
            if new_level > profile.hero_level:
                _logger.info("Hero level up: user_id=%s level=%s", user_id, new_level)
            self.profile_repository.update_totals(
                user_id,
                {"total_calories_burned": new_total, "hero_level": new_level},
            )
        return entry
