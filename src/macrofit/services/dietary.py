"""Dietary restriction compatibility."""

from collections.abc import Iterable

from macrofit.domain.meals import Meal
from macrofit.domain.profile import DietaryRestriction


def is_compatible(
    meal: Meal, user_restrictions: Iterable[DietaryRestriction]
) -> bool:
    """Return True when the meal satisfies every selected restriction.

    An empty selection, or any selection containing ``NONE``, accepts
    every meal. Otherwise each selected tag must be listed on the meal.
    """
    required = set(user_restrictions)
    if not required or DietaryRestriction.NONE in required:
        return True
    return required <= meal.restrictions
