"""Tests for configuration helpers."""

import pytest
from pydantic import ValidationError

from macrofit.config import Settings, parse_restrictions
from macrofit.domain.profile import DietaryRestriction


def test_parse_restrictions_handles_labels() -> None:
    parsed = parse_restrictions("Vegan, gluten-free, Dairy Free, unknown")

    assert parsed == frozenset(
        {
            DietaryRestriction.VEGAN,
            DietaryRestriction.GLUTEN_FREE,
            DietaryRestriction.DAIRY_FREE,
        }
    )


def test_parse_restrictions_empty() -> None:
    assert parse_restrictions(None) == frozenset()
    assert parse_restrictions("") == frozenset()


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MACROFIT_DEBUG", "true")
    monkeypatch.setenv("MACROFIT_GREAT_FIT_PERCENT", "25")

    settings = Settings()

    assert settings.debug is True
    assert settings.great_fit_percent == 25


def test_settings_reject_inverted_thresholds() -> None:
    with pytest.raises(ValidationError):
        Settings(great_fit_percent=50, moderate_fit_percent=40)


def test_environment_reads_unprefixed_variable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("MACROFIT_ENVIRONMENT", "ignored")

    assert Settings().environment == "staging"
