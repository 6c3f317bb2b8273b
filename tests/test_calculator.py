"""Tests for the nutrition calculator."""

from dataclasses import replace

import pytest

from macrofit.domain.profile import (
    GOAL_CALORIE_ADJUSTMENTS,
    ActivityLevel,
    FitnessGoal,
    Gender,
    UserProfile,
)
from macrofit.services.calculator import (
    compute_bmr,
    compute_calories_for_goal,
    compute_macros,
    compute_target_calories,
    compute_targets,
    compute_tdee,
)


def test_reference_profile_maintenance(profile: UserProfile) -> None:
    assert compute_bmr(profile) == 1642.5
    assert compute_tdee(profile) == 2545
    assert compute_target_calories(profile) == 2545


def test_reference_profile_cutting(profile: UserProfile) -> None:
    cutting = replace(profile, goal=FitnessGoal.CUTTING)

    macros = compute_macros(cutting)

    assert compute_target_calories(cutting) == 2045
    assert macros.protein == 154
    assert macros.fats == 56
    assert macros.carbs == 231
    assert macros.calories == 2045


def test_maintenance_and_bulking_macros(profile: UserProfile) -> None:
    maintenance = compute_macros(profile)
    bulking = compute_macros(replace(profile, goal=FitnessGoal.BULKING))

    assert (maintenance.protein, maintenance.fats, maintenance.carbs) == (126, 70, 352)
    assert bulking.calories == 3045
    assert (bulking.protein, bulking.fats, bulking.carbs) == (112, 84, 460)


def test_female_uses_lower_constant(profile: UserProfile) -> None:
    female = replace(
        profile, gender=Gender.FEMALE, activity_level=ActivityLevel.SEDENTARY
    )

    assert compute_bmr(female) == 1476.5
    assert compute_tdee(female) == 1771


def test_other_gender_matches_male(profile: UserProfile) -> None:
    other = replace(profile, gender=Gender.OTHER)

    assert compute_bmr(other) == compute_bmr(profile)


@pytest.mark.parametrize("goal", list(FitnessGoal))
@pytest.mark.parametrize("activity", list(ActivityLevel))
def test_target_is_tdee_plus_adjustment(
    profile: UserProfile, goal: FitnessGoal, activity: ActivityLevel
) -> None:
    adjusted = replace(profile, goal=goal, activity_level=activity)

    targets = compute_targets(adjusted)

    assert targets.target_calories == targets.tdee + GOAL_CALORIE_ADJUSTMENTS[goal]
    assert targets.macros.calories == targets.target_calories


def test_calories_for_goal_ignores_profile_goal(profile: UserProfile) -> None:
    assert compute_calories_for_goal(profile, FitnessGoal.CUTTING) == 2045
    assert compute_calories_for_goal(profile, FitnessGoal.BULKING) == 3045


def test_cutting_clamps_negative_carbs_but_maintenance_does_not() -> None:
    heavy = UserProfile(
        age=119,
        weight=299.0,
        height=101.0,
        activity_level=ActivityLevel.SEDENTARY,
        gender=Gender.FEMALE,
        goal=FitnessGoal.CUTTING,
    )

    assert compute_macros(heavy).carbs == 0
    assert compute_macros(replace(heavy, goal=FitnessGoal.MAINTENANCE)).carbs == -351


def test_compute_targets_is_idempotent(profile: UserProfile) -> None:
    assert compute_targets(profile) == compute_targets(profile)
