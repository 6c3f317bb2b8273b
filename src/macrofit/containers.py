"""Dependency container wiring for the application."""

from dataclasses import dataclass

from macrofit.app_logging import configure_logging
from macrofit.config import Settings
from macrofit.services.catalog import MealCatalog, default_catalog
from macrofit.services.planner import PlannerService
from macrofit.services.recommendations import RecommendationEngine


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: MealCatalog
    recommendation_engine: RecommendationEngine
    planner_service: PlannerService


def build_container(
    settings: Settings | None = None, catalog: MealCatalog | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    resolved_catalog = catalog if catalog is not None else default_catalog()
    recommendation_engine = RecommendationEngine(
        catalog=resolved_catalog,
        debug=resolved_settings.debug,
    )
    planner_service = PlannerService(
        engine=recommendation_engine,
        great_fit_percent=resolved_settings.great_fit_percent,
        moderate_fit_percent=resolved_settings.moderate_fit_percent,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        recommendation_engine=recommendation_engine,
        planner_service=planner_service,
    )
