"""Dashboard API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from fitness_tracker.api.models import (  # noqa: TC001
    ActivityCreate,
    MealCreate,
    ProfileUpdate,
)
from fitness_tracker.domain.errors import NotFoundError
from fitness_tracker.domain.stats import Period

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.catalog import ActivityType, FoodItem
    from fitness_tracker.domain.profile import DailyTargets, Profile
    from fitness_tracker.domain.stats import ActivityEntry, DailyTotals, MealEntry


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(dependencies=[Depends(require_api_token)], tags=["dashboard"])


@router.get("/users/{user_id}/profile")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    if profile is None:
        raise NotFoundError(f"Profile {user_id} not found")
    return _serialize_profile(profile)


@router.patch("/users/{user_id}/profile")
async def update_profile(
    user_id: UUID, payload: ProfileUpdate, request: Request
) -> dict[str, object]:
    """Update body metrics and return the refreshed profile."""
    container: AppContainer = request.app.state.container
    container.profile_service.update_body_metrics(
        user_id,
        height_cm=payload.height_cm,
        weight_kg=payload.weight_kg,
        goal=payload.goal,
        gender=payload.gender,
    )
    profile = container.profile_service.get_profile(user_id)
    if profile is None:
        raise NotFoundError(f"Profile {user_id} not found")
    return _serialize_profile(profile)


@router.get("/users/{user_id}/targets")
async def get_targets(user_id: UUID, request: Request) -> dict[str, object]:
    """Return daily calorie and protein targets, or null when incomplete."""
    container: AppContainer = request.app.state.container
    targets = container.profile_service.get_targets(user_id)
    return {"targets": _serialize_targets(targets) if targets else None}


@router.get("/users/{user_id}/stats")
async def get_stats(
    user_id: UUID, request: Request, period: Period = Period.WEEK
) -> dict[str, object]:
    """Return the per-day series for the last week or month."""
    container: AppContainer = request.app.state.container
    daily = container.stats_service.get_period(user_id, period)
    return {"period": period.value, "days": [_serialize_daily(day) for day in daily]}


@router.post("/users/{user_id}/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(
    user_id: UUID, payload: MealCreate, request: Request
) -> dict[str, object]:
    """Log a meal from the food catalog."""
    container: AppContainer = request.app.state.container
    entry = container.entry_log_service.log_meal(
        user_id, payload.food_id, payload.grams, payload.meal_type
    )
    return _serialize_meal(entry)


@router.post("/users/{user_id}/activities", status_code=status.HTTP_201_CREATED)
async def create_activity(
    user_id: UUID, payload: ActivityCreate, request: Request
) -> dict[str, object]:
    """Log an activity from the activity catalog."""
    container: AppContainer = request.app.state.container
    entry = container.entry_log_service.log_activity(
        user_id, payload.activity_id, payload.duration_minutes
    )
    return _serialize_activity(entry)


@router.get("/foods")
async def list_foods(request: Request, query: str | None = None) -> dict[str, object]:
    """Return catalog foods matching the query."""
    container: AppContainer = request.app.state.container
    foods = container.catalog_service.search_foods(query)
    return {"foods": [_serialize_food(food) for food in foods]}


@router.get("/activities")
async def list_activities(
    request: Request, query: str | None = None
) -> dict[str, object]:
    """Return catalog activities matching the query."""
    container: AppContainer = request.app.state.container
    activities = container.catalog_service.search_activities(query)
    return {"activities": [_serialize_activity_type(item) for item in activities]}


def _serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "user_id": str(profile.user_id),
        "username": profile.username,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "gender": profile.gender.value if profile.gender else None,
        "goal": profile.goal.value or None,
        "total_calories_consumed": profile.total_calories_consumed,
        "total_calories_burned": profile.total_calories_burned,
        "total_proteins_consumed": profile.total_proteins_consumed,
        "hero_level": profile.hero_level,
    }


def _serialize_targets(targets: DailyTargets) -> dict[str, object]:
    return {
        "daily_calories": targets.daily_calories,
        "daily_protein": targets.daily_protein,
    }


def _serialize_daily(daily: DailyTotals) -> dict[str, object]:
    return {
        "date": daily.day.isoformat(),
        "label": daily.label,
        "calories_consumed": daily.calories_consumed,
        "calories_burned": daily.calories_burned,
        "protein_consumed": daily.protein_consumed,
    }


def _serialize_meal(entry: MealEntry) -> dict[str, object]:
    return {
        "total_calories": entry.total_calories,
        "total_proteins_consumed": entry.total_proteins_consumed,
        "created_at": entry.created_at.isoformat(),
    }


def _serialize_activity(entry: ActivityEntry) -> dict[str, object]:
    return {
        "total_calories_burned": entry.total_calories_burned,
        "created_at": entry.created_at.isoformat(),
    }


def _serialize_food(food: FoodItem) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "calories_per_100g": food.calories_per_100g,
        "proteins_per_100g": food.proteins_per_100g,
    }


def _serialize_activity_type(activity: ActivityType) -> dict[str, object]:
    return {
        "id": str(activity.id),
        "name": activity.name,
        "calories_per_hour": activity.calories_per_hour,
        "category": activity.category,
    }
