"""Nutrition calculator: BMR, TDEE, target calories and macro split.

BMR uses the Mifflin-St Jeor equation:

    male/other: 10 * weight + 6.25 * height - 5 * age + 5
    female:     10 * weight + 6.25 * height - 5 * age - 161

All functions are pure. Inputs are not validated here; callers check
profiles with ``is_valid_profile`` first.
"""

from dataclasses import dataclass

from macrofit.domain.nutrition import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    Macros,
    NutritionTargets,
)
from macrofit.domain.profile import (
    ACTIVITY_MULTIPLIERS,
    GOAL_CALORIE_ADJUSTMENTS,
    FitnessGoal,
    Gender,
    UserProfile,
)

_MALE_CONSTANT = 5
_FEMALE_CONSTANT = -161


@dataclass(frozen=True)
class _MacroRatios:
    protein_g_per_kg: float
    fats_g_per_kg: float
    clamp_carbs: bool


# Only cutting clamps carbs at zero; the other goals can go negative for
# extreme inputs.
_MACRO_RATIOS: dict[FitnessGoal, _MacroRatios] = {
    FitnessGoal.CUTTING: _MacroRatios(2.2, 0.8, clamp_carbs=True),
    FitnessGoal.MAINTENANCE: _MacroRatios(1.8, 1.0, clamp_carbs=False),
    FitnessGoal.BULKING: _MacroRatios(1.6, 1.2, clamp_carbs=False),
}


def compute_bmr(profile: UserProfile) -> float:
    """Return basal metabolic rate in kcal/day."""
    base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    if profile.gender == Gender.FEMALE:
        return base + _FEMALE_CONSTANT
    return base + _MALE_CONSTANT


def compute_tdee(profile: UserProfile) -> int:
    """Return total daily energy expenditure, truncated to whole kcal."""
    return int(compute_bmr(profile) * ACTIVITY_MULTIPLIERS[profile.activity_level])


def compute_calories_for_goal(profile: UserProfile, goal: FitnessGoal) -> int:
    """Return daily calories for an arbitrary goal."""
    return compute_tdee(profile) + GOAL_CALORIE_ADJUSTMENTS[goal]


def compute_target_calories(profile: UserProfile) -> int:
    """Return daily calories for the profile's own goal."""
    return compute_calories_for_goal(profile, profile.goal)


def compute_macros(profile: UserProfile) -> Macros:
    """Split target calories into protein, fat and carb grams."""
    target_calories = compute_target_calories(profile)
    ratios = _MACRO_RATIOS[profile.goal]
    protein = profile.weight * ratios.protein_g_per_kg
    fats = profile.weight * ratios.fats_g_per_kg
    carb_calories = (
        target_calories - protein * PROTEIN_KCAL_PER_G - fats * FAT_KCAL_PER_G
    )
    carbs = carb_calories / CARBS_KCAL_PER_G
    if ratios.clamp_carbs:
        carbs = max(carbs, 0)
    return Macros(
        protein=int(protein),
        carbs=int(carbs),
        fats=int(fats),
        calories=target_calories,
    )


def compute_targets(profile: UserProfile) -> NutritionTargets:
    """Return BMR, TDEE, target calories and macros for a profile."""
    return NutritionTargets(
        bmr=compute_bmr(profile),
        tdee=compute_tdee(profile),
        target_calories=compute_target_calories(profile),
        macros=compute_macros(profile),
    )
