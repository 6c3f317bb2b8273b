"""Domain models for catalog meals."""

from dataclasses import dataclass
from enum import Enum

from macrofit.domain.nutrition import macro_percentages
from macrofit.domain.profile import DietaryRestriction


class MealType(str, Enum):
    """Slot of the day a meal is meant for."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    PRE_WORKOUT = "pre_workout"
    POST_WORKOUT = "post_workout"


class GoalFit(Enum):
    """How much of the daily calorie budget a single meal takes."""

    GREAT = "Great fit for your daily goals!"
    MODERATE = "Moderate portion of daily calories"
    HIGH = "High calorie meal - plan accordingly"


@dataclass(frozen=True)
class Meal:
    """Static catalog meal with macros and preparation details."""

    name: str
    image_name: str
    calories: int
    protein: int
    carbs: int
    fats: int
    meal_type: MealType
    ingredients: tuple[str, ...]
    instructions: tuple[str, ...]
    prep_time: int
    restrictions: frozenset[DietaryRestriction]

    @property
    def protein_pct(self) -> float:
        return macro_percentages(self.protein, self.carbs, self.fats, self.calories)[0]

    @property
    def carbs_pct(self) -> float:
        return macro_percentages(self.protein, self.carbs, self.fats, self.calories)[1]

    @property
    def fats_pct(self) -> float:
        return macro_percentages(self.protein, self.carbs, self.fats, self.calories)[2]


def percent_of_daily(meal: Meal, target_calories: int) -> int:
    """Return the meal's share of daily target calories, truncated."""
    if target_calories <= 0:
        return 0
    return int(meal.calories / target_calories * 100)


def goal_fit(
    meal: Meal,
    target_calories: int,
    great_fit_percent: int = 30,
    moderate_fit_percent: int = 40,
) -> GoalFit:
    """Classify a meal by its share of the daily calorie budget."""
    share = percent_of_daily(meal, target_calories)
    if share <= great_fit_percent:
        return GoalFit.GREAT
    if share <= moderate_fit_percent:
        return GoalFit.MODERATE
    return GoalFit.HIGH
