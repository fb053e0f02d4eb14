"""Random meal selection and meal swapping."""

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from mealplanner.ingest.schemas import Recipe
from mealplanner.logging_config import get_logger
from mealplanner.plan.categories import DEFAULT_CATEGORIES, Category
from mealplanner.plan.shopping_list import GroceryList, consolidate

logger = get_logger(__name__)


class MealPlanError(Exception):
    """Base exception for meal plan operations."""


class NoAlternativeMealsError(MealPlanError):
    """Raised when every recipe is already part of the plan."""


def select_meals(
    recipes: Sequence[Recipe],
    count: int,
    rng: random.Random | None = None,
) -> list[Recipe]:
    """
    Pick ``count`` distinct recipes at random.

    The count is clamped to the number of available recipes.
    """
    if count < 1:
        raise ValueError(f"Meal count must be at least 1, got {count}")

    rng = rng or random.Random()
    count = min(count, len(recipes))
    return rng.sample(list(recipes), count)


@dataclass
class MealPlan:
    """Selected meals and the grocery list that covers them."""

    meals: list[Recipe]
    grocery_list: GroceryList = field(default_factory=dict)
    categories: tuple[Category, ...] = DEFAULT_CATEGORIES

    @classmethod
    def generate(
        cls,
        recipes: Sequence[Recipe],
        count: int,
        rng: random.Random | None = None,
        categories: tuple[Category, ...] = DEFAULT_CATEGORIES,
    ) -> "MealPlan":
        """Select meals and build their grocery list."""
        meals = select_meals(recipes, count, rng)
        logger.info(f"Selected {len(meals)} of {len(recipes)} recipes")
        return cls.from_meals(meals, categories)

    @classmethod
    def from_meals(
        cls,
        meals: Sequence[Recipe],
        categories: tuple[Category, ...] = DEFAULT_CATEGORIES,
    ) -> "MealPlan":
        meals = list(meals)
        return cls(meals=meals, grocery_list=consolidate(meals, categories), categories=categories)

    def swap(
        self,
        index: int,
        recipes: Sequence[Recipe],
        rng: random.Random | None = None,
    ) -> Recipe:
        """
        Replace the meal at ``index`` with a random recipe not already planned.

        The grocery list is rebuilt from scratch for the new set of meals.

        Returns:
            The recipe that was swapped in.
        """
        if not 0 <= index < len(self.meals):
            raise IndexError(f"No meal at position {index} (plan has {len(self.meals)} meals)")

        planned_names = {meal.name for meal in self.meals}
        candidates = [recipe for recipe in recipes if recipe.name not in planned_names]
        if not candidates:
            raise NoAlternativeMealsError(
                "No more recipes available to swap; every recipe is already in the plan"
            )

        rng = rng or random.Random()
        replacement = rng.choice(candidates)
        logger.info(f"Swapping '{self.meals[index].name}' for '{replacement.name}'")

        self.meals[index] = replacement
        self.grocery_list = consolidate(self.meals, self.categories)
        return replacement
