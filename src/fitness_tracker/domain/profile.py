"""Domain models for user profiles and daily targets."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class Gender(Enum):
    """Gender as selected on the profile screen."""

    MALE = "Homme"
    FEMALE = "Femme"
    OTHER = "Autre"


class Goal(Enum):
    """Fitness goal as selected on the profile screen."""

    LOSE_WEIGHT = "Perte de poids"
    GAIN_MUSCLE = "Prise de muscle"
    MAINTAIN = "Maintien"
    UNSET = ""


_GENDER_ALIASES = {
    "homme": Gender.MALE,
    "male": Gender.MALE,
    "femme": Gender.FEMALE,
    "female": Gender.FEMALE,
    "autre": Gender.OTHER,
    "other": Gender.OTHER,
}

_GOAL_ALIASES = {
    "perte de poids": Goal.LOSE_WEIGHT,
    "lose_weight": Goal.LOSE_WEIGHT,
    "prise de muscle": Goal.GAIN_MUSCLE,
    "gain_muscle": Goal.GAIN_MUSCLE,
    "maintien": Goal.MAINTAIN,
    "maintain": Goal.MAINTAIN,
}


def parse_gender(raw: object) -> Gender | None:
    """Parse a stored gender label; unknown labels map to OTHER."""
    if isinstance(raw, Gender):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return None
    return _GENDER_ALIASES.get(raw.strip().lower(), Gender.OTHER)


def parse_goal(raw: object) -> Goal:
    """Parse a stored goal label; empty or unknown labels map to UNSET."""
    if isinstance(raw, Goal):
        return raw
    if not isinstance(raw, str):
        return Goal.UNSET
    return _GOAL_ALIASES.get(raw.strip().lower(), Goal.UNSET)


@dataclass(frozen=True)
class Profile:
    """Body metrics and running totals for a user."""

    user_id: UUID
    username: str | None = None
    weight_kg: float | None = None
    height_cm: float | None = None
    gender: Gender | None = None
    goal: Goal = Goal.UNSET
    total_calories_consumed: float = 0
    total_calories_burned: float = 0
    total_proteins_consumed: float = 0
    hero_level: int = 1


@dataclass(frozen=True)
class DailyTargets:
    """Daily calorie and protein targets."""

    daily_calories: int
    daily_protein: int
