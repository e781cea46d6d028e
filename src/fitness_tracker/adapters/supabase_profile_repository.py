"""Supabase repository for user profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.profile import Profile, parse_gender, parse_goal
from fitness_tracker.services.profiles import ProfileRepository

_PROFILE_COLUMNS = (
    "id, username, height, weight, goal, gender, total_calories_consumed, "
    "total_calories_burned, total_proteins_consumed, hero_level"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the profiles table."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""
        response = (
            self.client.table("profiles")
            .select(_PROFILE_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_body_metrics(self, user_id: UUID, payload: dict[str, object]) -> None:
        """Update height, weight, goal and gender columns."""
        self.client.table("profiles").update(payload).eq("id", str(user_id)).execute()

    def update_totals(self, user_id: UUID, payload: dict[str, object]) -> None:
        """Update running totals and hero level."""
        self.client.table("profiles").update(payload).eq("id", str(user_id)).execute()


def _parse_profile(row: dict[str, object]) -> Profile:
    return Profile(
        user_id=UUID(str(row["id"])),
        username=row.get("username"),
        weight_kg=_optional_float(row.get("weight")),
        height_cm=_optional_float(row.get("height")),
        gender=parse_gender(row.get("gender")),
        goal=parse_goal(row.get("goal")),
        total_calories_consumed=float(row.get("total_calories_consumed") or 0),
        total_calories_burned=float(row.get("total_calories_burned") or 0),
        total_proteins_consumed=float(row.get("total_proteins_consumed") or 0),
        hero_level=int(row.get("hero_level") or 1),
    )


def _optional_float(value: object) -> float | None:
    if value is None or value == "":
        return None
    return float(value)
