"""Application configuration."""

import os

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from macrofit.domain.profile import DietaryRestriction

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Fields use the `MACROFIT_` prefix except `environment`, which reads the
    same unprefixed `ENVIRONMENT` variable that selects the `.env` file.
    """

    environment: str = Field(default=_ENVIRONMENT, validation_alias="ENVIRONMENT")
    log_level: str = "INFO"
    debug: bool = False
    great_fit_percent: int = 30
    moderate_fit_percent: int = 40

    model_config = SettingsConfigDict(
        env_prefix="MACROFIT_",
        populate_by_name=True,
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("moderate_fit_percent")
    @classmethod
    def _moderate_above_great(cls, value: int, info: ValidationInfo) -> int:
        great = info.data.get("great_fit_percent")
        if great is not None and value < great:
            raise ValueError("moderate_fit_percent must be >= great_fit_percent")
        return value


def parse_restrictions(raw: str | None) -> frozenset[DietaryRestriction]:
    """Parse comma-separated restriction tags, ignoring unknown ones."""
    if raw is None:
        return frozenset()
    known = {restriction.value: restriction for restriction in DietaryRestriction}
    tags: set[DietaryRestriction] = set()
    for chunk in raw.split(","):
        value = chunk.strip().lower().replace("-", "_").replace(" ", "_")
        if value in known:
            tags.add(known[value])
    return frozenset(tags)
