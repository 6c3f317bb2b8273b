"""User profile domain models."""

from dataclasses import dataclass, field
from enum import Enum

from macrofit.domain.errors import InvalidProfileError


class ActivityLevel(str, Enum):
    """Typical weekly activity used to scale BMR into TDEE."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class Gender(str, Enum):
    """Gender used to select the Mifflin-St Jeor constant."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class FitnessGoal(str, Enum):
    """Body composition goal."""

    CUTTING = "cutting"
    MAINTENANCE = "maintenance"
    BULKING = "bulking"


class DietaryRestriction(str, Enum):
    """Dietary restriction tag a meal may satisfy."""

    NONE = "none"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten_free"
    DAIRY_FREE = "dairy_free"
    NUT_FREE = "nut_free"
    LOW_CARB = "low_carb"
    KETO = "keto"


ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

ACTIVITY_DESCRIPTIONS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Little or no exercise",
    ActivityLevel.LIGHTLY_ACTIVE: "Exercise 1-3 days/week",
    ActivityLevel.MODERATELY_ACTIVE: "Exercise 3-5 days/week",
    ActivityLevel.VERY_ACTIVE: "Exercise 6-7 days/week",
    ActivityLevel.EXTREMELY_ACTIVE: "Very hard exercise daily",
}

GOAL_CALORIE_ADJUSTMENTS: dict[FitnessGoal, int] = {
    FitnessGoal.CUTTING: -500,
    FitnessGoal.MAINTENANCE: 0,
    FitnessGoal.BULKING: 500,
}

# Exclusive bounds.
AGE_RANGE = (0, 120)
WEIGHT_RANGE_KG = (20.0, 300.0)
HEIGHT_RANGE_CM = (100.0, 250.0)


@dataclass
class UserProfile:
    """Biometrics, goal and dietary preferences entered by the user."""

    age: int = 25
    weight: float = 70.0
    height: float = 170.0
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    gender: Gender = Gender.MALE
    goal: FitnessGoal = FitnessGoal.MAINTENANCE
    dietary_restrictions: frozenset[DietaryRestriction] = field(
        default_factory=frozenset
    )


def invalid_profile_fields(profile: UserProfile) -> list[str]:
    """Return the names of fields outside plausible human ranges."""
    invalid = []
    if not AGE_RANGE[0] < profile.age < AGE_RANGE[1]:
        invalid.append("age")
    if not WEIGHT_RANGE_KG[0] < profile.weight < WEIGHT_RANGE_KG[1]:
        invalid.append("weight")
    if not HEIGHT_RANGE_CM[0] < profile.height < HEIGHT_RANGE_CM[1]:
        invalid.append("height")
    return invalid


def is_valid_profile(profile: UserProfile) -> bool:
    """Return True when age, weight and height are plausible."""
    return not invalid_profile_fields(profile)


def validate_profile(profile: UserProfile) -> None:
    """Raise InvalidProfileError when the profile fails validation."""
    invalid = invalid_profile_fields(profile)
    if invalid:
        raise InvalidProfileError(invalid)
