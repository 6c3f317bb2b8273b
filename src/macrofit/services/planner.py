"""Query facade used by presentation layers."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from macrofit.domain.meals import GoalFit, Meal, MealType, goal_fit
from macrofit.domain.nutrition import Macros, NutritionTargets
from macrofit.domain.profile import (
    DietaryRestriction,
    FitnessGoal,
    UserProfile,
    is_valid_profile,
)
from macrofit.services.calculator import (
    compute_calories_for_goal,
    compute_macros,
    compute_targets,
)
from macrofit.services.recommendations import DailyPlan, RecommendationEngine

_logger = logging.getLogger(__name__)


@dataclass
class PlannerService:
    """Stateless queries over a caller-owned profile and the meal catalog.

    Nothing derived from a profile is cached, so callers may change their
    profile between calls and always get fresh results.
    """

    engine: RecommendationEngine
    great_fit_percent: int = 30
    moderate_fit_percent: int = 40
    debug: bool = False

    def is_valid_profile(self, profile: UserProfile) -> bool:
        """Return True when the profile's biometrics are plausible."""
        return is_valid_profile(profile)

    def calculate(self, profile: UserProfile) -> NutritionTargets:
        """Return BMR, TDEE, target calories and macros."""
        targets = compute_targets(profile)
        if self.debug:
            _logger.info(
                "Calculate: goal=%s bmr=%s tdee=%s target=%s",
                profile.goal.value,
                targets.bmr,
                targets.tdee,
                targets.target_calories,
            )
        return targets

    def macros_for_goal(self, profile: UserProfile, goal: FitnessGoal) -> Macros:
        """Return macros as if the profile had a different goal."""
        return compute_macros(replace(profile, goal=goal))

    def calories_for_goal(self, profile: UserProfile, goal: FitnessGoal) -> int:
        """Return target calories as if the profile had a different goal."""
        return compute_calories_for_goal(profile, goal)

    def filter_catalog(self, restrictions: Iterable[DietaryRestriction]) -> list[Meal]:
        """Return catalog meals compatible with the restrictions."""
        return self.engine.filter_by_restrictions(restrictions)

    def recommend(
        self, profile: UserProfile, meal_type: MealType | None = None
    ) -> list[Meal]:
        """Return compatible meals ranked for the profile's targets."""
        pool = self.filter_catalog(profile.dietary_restrictions)
        return self.engine.recommend(self.calculate(profile), meal_type, pool)

    def daily_plan(self, profile: UserProfile) -> DailyPlan:
        """Return a greedy one-day plan within the profile's budgets."""
        pool = self.filter_catalog(profile.dietary_restrictions)
        return self.engine.generate_daily_plan(self.calculate(profile), pool)

    def search(
        self,
        profile: UserProfile,
        text: str | None,
        meal_type: MealType | None = None,
    ) -> list[Meal]:
        """Return compatible meals matching the name text, ranked."""
        matches = self.engine.catalog.search(text)
        pool = self.engine.filter_by_restrictions(profile.dietary_restrictions, matches)
        return self.engine.recommend(self.calculate(profile), meal_type, pool)

    def meal_fit(self, profile: UserProfile, meal: Meal) -> GoalFit:
        """Classify a meal against the profile's daily calorie target."""
        return goal_fit(
            meal,
            self.calculate(profile).target_calories,
            great_fit_percent=self.great_fit_percent,
            moderate_fit_percent=self.moderate_fit_percent,
        )
