"""Read-only meal catalog."""

from collections.abc import Iterable, Iterator

from macrofit.domain.meals import Meal, MealType
from macrofit.seed_meals import SEED_MEALS


class MealCatalog:
    """Immutable ordered snapshot of meals, safe for concurrent reads."""

    def __init__(self, meals: Iterable[Meal]) -> None:
        self._meals = tuple(meals)

    @property
    def meals(self) -> tuple[Meal, ...]:
        return self._meals

    def __len__(self) -> int:
        return len(self._meals)

    def __iter__(self) -> Iterator[Meal]:
        return iter(self._meals)

    def __getitem__(self, index: int) -> Meal:
        return self._meals[index]

    def by_type(self, meal_type: MealType) -> list[Meal]:
        """Return meals of a given type in catalog order."""
        return [meal for meal in self._meals if meal.meal_type == meal_type]

    def search(self, text: str | None) -> list[Meal]:
        """Return meals whose name contains the text, ignoring case."""
        if not text:
            return list(self._meals)
        needle = text.casefold()
        return [meal for meal in self._meals if needle in meal.name.casefold()]


def default_catalog() -> MealCatalog:
    """Return a catalog over the bundled reference meals."""
    return MealCatalog(SEED_MEALS)
