"""Nutrition target domain models."""

from dataclasses import dataclass

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


def macro_percentages(
    protein: int, carbs: int, fats: int, calories: int
) -> tuple[float, float, float]:
    """Return protein, carbs and fat shares of total calories in percent.

    Non-positive calorie totals yield zeros instead of dividing by zero.
    """
    if calories <= 0:
        return 0.0, 0.0, 0.0
    return (
        protein * PROTEIN_KCAL_PER_G / calories * 100,
        carbs * CARBS_KCAL_PER_G / calories * 100,
        fats * FAT_KCAL_PER_G / calories * 100,
    )


@dataclass(frozen=True)
class Macros:
    """Daily macronutrient targets in grams."""

    protein: int
    carbs: int
    fats: int
    calories: int

    @property
    def protein_pct(self) -> float:
        return macro_percentages(self.protein, self.carbs, self.fats, self.calories)[0]

    @property
    def carbs_pct(self) -> float:
        return macro_percentages(self.protein, self.carbs, self.fats, self.calories)[1]

    @property
    def fats_pct(self) -> float:
        return macro_percentages(self.protein, self.carbs, self.fats, self.calories)[2]


@dataclass(frozen=True)
class NutritionTargets:
    """Energy expenditure and macro targets derived from a profile."""

    bmr: float
    tdee: int
    target_calories: int
    macros: Macros
