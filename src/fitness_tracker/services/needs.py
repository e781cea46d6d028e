"""Daily calorie and protein target estimation."""

import math

from fitness_tracker.domain.profile import DailyTargets, Gender, Goal, Profile

# No birthdate is collected, every user is assumed to be this age.
ASSUMED_AGE = 25

_ACTIVITY_FACTORS = {
    Goal.GAIN_MUSCLE: 1.6,
    Goal.LOSE_WEIGHT: 1.2,
}
_DEFAULT_ACTIVITY_FACTOR = 1.4

_PROTEIN_PER_KG = {
    Goal.GAIN_MUSCLE: 2.2,
    Goal.LOSE_WEIGHT: 1.8,
}
_DEFAULT_PROTEIN_PER_KG = 1.6


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def basal_metabolic_rate(weight_kg: float, height_cm: float, gender: Gender) -> float:
    """Return the Harris-Benedict BMR at the assumed age."""
    if gender is Gender.FEMALE:
        return 655 + 9.6 * weight_kg + 1.8 * height_cm - 4.7 * ASSUMED_AGE
    return 66 + 13.7 * weight_kg + 5 * height_cm - 6.8 * ASSUMED_AGE


def _is_positive(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def estimate_needs(profile: Profile) -> DailyTargets | None:
    """Return daily targets, or None when weight, height or gender is missing."""
    weight = profile.weight_kg
    height = profile.height_cm
    if not _is_positive(weight) or not _is_positive(height):
        return None
    if profile.gender is None:
        return None

    bmr = basal_metabolic_rate(weight, height, profile.gender)
    activity_factor = _ACTIVITY_FACTORS.get(profile.goal, _DEFAULT_ACTIVITY_FACTOR)
    protein_per_kg = _PROTEIN_PER_KG.get(profile.goal, _DEFAULT_PROTEIN_PER_KG)
    return DailyTargets(
        daily_calories=round_half_up(bmr * activity_factor),
        daily_protein=round_half_up(weight * protein_per_kg),
    )
