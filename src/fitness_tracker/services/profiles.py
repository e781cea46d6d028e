"""Profile services."""

import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.domain.profile import DailyTargets, Gender, Goal, Profile
from fitness_tracker.services.needs import estimate_needs


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""

    def update_body_metrics(self, user_id: UUID, payload: dict[str, object]) -> None:
        """Update body metric columns for a user."""

    def update_totals(self, user_id: UUID, payload: dict[str, object]) -> None:
        """Update running total columns for a user."""


@dataclass
class ProfileService:
    """Application service for profile reads and edits."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile."""
        return self.repository.get_profile(user_id)

    def get_targets(self, user_id: UUID) -> DailyTargets | None:
        """Return daily targets, or None when the profile is missing or incomplete."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        return estimate_needs(profile)

    def update_body_metrics(  # noqa: PLR0913
        self,
        user_id: UUID,
        height_cm: float | None = None,
        weight_kg: float | None = None,
        goal: Goal | None = None,
        gender: Gender | None = None,
    ) -> None:
        """Persist profile edits made on the profile screen."""
        payload: dict[str, object] = {}
        if height_cm is not None:
            payload["height"] = _require_positive(height_cm, "height_cm")
        if weight_kg is not None:
            payload["weight"] = _require_positive(weight_kg, "weight_kg")
        if goal is not None:
            payload["goal"] = goal.value or None
        if gender is not None:
            payload["gender"] = gender.value
        if not payload:
            return
        self.repository.update_body_metrics(user_id, payload)


def _require_positive(value: float, field_name: str) -> float:
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(f"{field_name} must be a positive number")
    return value
