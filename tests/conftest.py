"""Shared test fixtures."""

from collections.abc import Callable

import pytest

from macrofit.config import Settings
from macrofit.domain.meals import Meal, MealType
from macrofit.domain.nutrition import Macros, NutritionTargets
from macrofit.domain.profile import (
    ActivityLevel,
    DietaryRestriction,
    FitnessGoal,
    Gender,
    UserProfile,
)
from macrofit.services.catalog import MealCatalog, default_catalog
from macrofit.services.planner import PlannerService
from macrofit.services.recommendations import RecommendationEngine

MealFactory = Callable[..., Meal]


def make_meal(
    name: str = "Test Meal",
    calories: int = 500,
    protein: int = 30,
    carbs: int = 50,
    fats: int = 15,
    meal_type: MealType = MealType.LUNCH,
    restrictions: frozenset[DietaryRestriction] = frozenset(),
) -> Meal:
    """Build a meal with sensible defaults for tests."""
    return Meal(
        name=name,
        image_name=name.lower().replace(" ", "_"),
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        meal_type=meal_type,
        ingredients=("ingredient",),
        instructions=("step",),
        prep_time=10,
        restrictions=restrictions,
    )


def make_targets(target_calories: int, protein: int) -> NutritionTargets:
    """Build nutrition targets without going through the calculator."""
    return NutritionTargets(
        bmr=0.0,
        tdee=target_calories,
        target_calories=target_calories,
        macros=Macros(protein=protein, carbs=0, fats=0, calories=target_calories),
    )


@pytest.fixture
def meal_factory() -> MealFactory:
    return make_meal


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        log_level="INFO",
        debug=False,
        great_fit_percent=30,
        moderate_fit_percent=40,
    )


@pytest.fixture
def catalog() -> MealCatalog:
    return default_catalog()


@pytest.fixture
def engine(catalog: MealCatalog) -> RecommendationEngine:
    return RecommendationEngine(catalog=catalog)


@pytest.fixture
def planner(engine: RecommendationEngine) -> PlannerService:
    return PlannerService(engine=engine)


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        age=25,
        weight=70.0,
        height=170.0,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        gender=Gender.MALE,
        goal=FitnessGoal.MAINTENANCE,
    )
