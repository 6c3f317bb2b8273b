"""Meal recommendation engine."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from macrofit.domain.meals import Meal, MealType
from macrofit.domain.nutrition import NutritionTargets
from macrofit.domain.profile import DietaryRestriction
from macrofit.services.catalog import MealCatalog
from macrofit.services.dietary import is_compatible

MEALS_PER_DAY = 4
PLAN_MEAL_TYPES: tuple[MealType, ...] = (
    MealType.BREAKFAST,
    MealType.LUNCH,
    MealType.DINNER,
    MealType.SNACK,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyPlan(Sequence[Meal]):
    """Meals picked for one day with their running totals."""

    meals: tuple[Meal, ...] = ()
    skipped_types: tuple[MealType, ...] = ()

    def __getitem__(self, index: int | slice) -> Meal | tuple[Meal, ...]:
        return self.meals[index]

    def __iter__(self) -> Iterator[Meal]:
        return iter(self.meals)

    def __len__(self) -> int:
        return len(self.meals)

    @property
    def total_calories(self) -> int:
        return sum(meal.calories for meal in self.meals)

    @property
    def total_protein(self) -> int:
        return sum(meal.protein for meal in self.meals)

    @property
    def total_carbs(self) -> int:
        return sum(meal.carbs for meal in self.meals)

    @property
    def total_fats(self) -> int:
        return sum(meal.fats for meal in self.meals)


@dataclass
class RecommendationEngine:
    """Filter, rank and assemble catalog meals against nutrition targets."""

    catalog: MealCatalog
    debug: bool = False

    def filter_by_restrictions(
        self,
        restrictions: Iterable[DietaryRestriction],
        meals: Iterable[Meal] | None = None,
    ) -> list[Meal]:
        """Return compatible meals, keeping their original order."""
        required = frozenset(restrictions)
        pool = self.catalog if meals is None else meals
        return [meal for meal in pool if is_compatible(meal, required)]

    def rank_by_calorie_proximity(
        self, meals: Iterable[Meal], target_calories_per_meal: int
    ) -> list[Meal]:
        """Sort meals by distance from the per-meal calorie target.

        The sort is stable, so equally distant meals keep their order.
        """
        return sorted(
            meals, key=lambda meal: abs(meal.calories - target_calories_per_meal)
        )

    def recommend(
        self,
        targets: NutritionTargets,
        meal_type: MealType | None = None,
        meals: Sequence[Meal] | None = None,
    ) -> list[Meal]:
        """Return meals ranked for the targets.

        ``meals`` is a pre-filtered pool; without one the whole catalog is
        used. The per-meal target assumes four meals a day.
        """
        pool: Iterable[Meal] = self.catalog if meals is None else meals
        if meal_type is not None:
            pool = [meal for meal in pool if meal.meal_type == meal_type]
        per_meal = targets.target_calories // MEALS_PER_DAY
        ranked = self.rank_by_calorie_proximity(pool, per_meal)
        if self.debug:
            _logger.info(
                "Recommend: type=%s per_meal=%s results=%s",
                meal_type.value if meal_type else "any",
                per_meal,
                len(ranked),
            )
        return ranked

    def generate_daily_plan(
        self, targets: NutritionTargets, meals: Sequence[Meal] | None = None
    ) -> DailyPlan:
        """Greedily pick one meal per slot within calorie and protein budgets.

        Slots are visited once in order and earlier picks are never revised,
        so a feasible combination can be missed. Slots with no meal that
        fits the remaining budget are skipped.
        """
        remaining_calories = targets.target_calories
        remaining_protein = targets.macros.protein
        picked: list[Meal] = []
        skipped: list[MealType] = []

        for meal_type in PLAN_MEAL_TYPES:
            candidates = self.recommend(targets, meal_type=meal_type, meals=meals)
            best = next(
                (
                    meal
                    for meal in candidates
                    if meal.calories <= remaining_calories
                    and meal.protein <= remaining_protein
                ),
                None,
            )
            if best is None:
                skipped.append(meal_type)
                continue
            picked.append(best)
            remaining_calories -= best.calories
            remaining_protein -= best.protein

        if self.debug:
            _logger.info(
                "Daily plan: meals=%s skipped=%s remaining_calories=%s "
                "remaining_protein=%s",
                len(picked),
                [meal_type.value for meal_type in skipped],
                remaining_calories,
                remaining_protein,
            )
        return DailyPlan(meals=tuple(picked), skipped_types=tuple(skipped))
