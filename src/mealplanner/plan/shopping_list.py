"""Shopping list generation by consolidating ingredient lines across recipes."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from mealplanner.ingest.schemas import Recipe, split_ingredient_lines
from mealplanner.logging_config import get_logger
from mealplanner.normalize.names import normalize_ingredient_name
from mealplanner.normalize.units import (
    ParsedIngredient,
    extract_quantity_and_unit,
    format_quantity,
    normalize_unit,
    parse_quantity_string,
)
from mealplanner.plan.categories import (
    DEFAULT_CATEGORIES,
    Category,
    categorize_ingredient,
    fallback_category,
)

logger = get_logger(__name__)

# Category key -> sorted display strings, in category order
GroceryList = dict[str, list[str]]

# (category key, normalized name, normalized unit)
ConsolidationKey = tuple[str, str, str]

RecipeRecord = Recipe | Mapping[str, Any]


@dataclass
class ConsolidatedEntry:
    """One purchasable item with quantities summed across ingredient lines."""

    category: str
    name: str
    unit: str
    original_unit: str = ""
    quantity: float = 0.0
    has_quantity: bool = False
    sources: list[str] = field(default_factory=list)

    @property
    def key(self) -> ConsolidationKey:
        return (self.category, self.name, self.unit)

    def add(self, parsed: ParsedIngredient, value: float | None) -> None:
        """Fold one parsed line into this entry."""
        if value is not None:
            self.quantity += value
            self.has_quantity = True
        if not self.original_unit and parsed.unit:
            self.original_unit = parsed.unit
        self.sources.append(parsed.original)

    def to_display_string(self) -> str:
        """
        Render the entry for the grocery list.

        "3 cup milk", "2 1/2 lb ground beef", "4 onion", or for entries
        without any quantity "salt" / "salt (needed for 3 recipes)".
        """
        if self.has_quantity and self.quantity > 0:
            parts = [format_quantity(self.quantity), self.unit, self.name]
            return " ".join(part for part in parts if part)

        if len(self.sources) > 1:
            return f"{self.name} (needed for {len(self.sources)} recipes)"
        return self.name


def recipe_ingredient_lines(recipe: RecipeRecord) -> list[str]:
    """Get the ingredient lines of a Recipe or a raw sheet row."""
    if isinstance(recipe, Recipe):
        return recipe.ingredients
    if isinstance(recipe, Mapping):
        return split_ingredient_lines(
            recipe.get("Ingredient List") or recipe.get("ingredient_list")
        )
    raise TypeError(f"Expected a Recipe or mapping, got {type(recipe).__name__}")


class ShoppingListGenerator:
    """
    Accumulates ingredient lines into a categorized grocery list.

    Each line is categorized, split into quantity/unit/item, and merged with
    earlier lines sharing the same category, normalized name and normalized
    unit. Units are never converted: "1 cup milk" and "8 oz milk" stay two
    entries.

    A generator holds the state of a single consolidation run; create a new
    one per meal plan.
    """

    def __init__(self, categories: tuple[Category, ...] = DEFAULT_CATEGORIES):
        # Fail early on a configuration without a catch-all category
        fallback_category(categories)
        self.categories = categories
        self._entries: dict[str, dict[tuple[str, str], ConsolidatedEntry]] = {
            category.key: {} for category in categories
        }
        self.line_count = 0

    def add_recipes(self, recipes: Iterable[RecipeRecord]) -> "ShoppingListGenerator":
        for recipe in recipes:
            self.add_recipe(recipe)
        return self

    def add_recipe(self, recipe: RecipeRecord) -> None:
        for line in recipe_ingredient_lines(recipe):
            self.add_line(line)

    def add_line(self, line: str) -> ConsolidatedEntry:
        """Fold a single raw ingredient line into the list."""
        category = categorize_ingredient(line, self.categories)
        parsed = extract_quantity_and_unit(line)
        name = normalize_ingredient_name(parsed.item)
        unit = normalize_unit(parsed.unit)

        bucket = self._entries[category.key]
        entry = bucket.get((name, unit))
        if entry is None:
            entry = ConsolidatedEntry(category=category.key, name=name, unit=unit)
            bucket[(name, unit)] = entry

        value = parse_quantity_string(parsed.quantity)
        if parsed.has_quantity and value is None:
            logger.warning(f"Ignoring unusable quantity {parsed.quantity!r} in {line!r}")
        elif value is not None and not math.isfinite(entry.quantity + value):
            logger.warning(
                f"Ignoring quantity {parsed.quantity!r} in {line!r}: total would overflow"
            )
            value = None

        entry.add(parsed, value)
        self.line_count += 1
        return entry

    def entries(self, category_key: str | None = None) -> list[ConsolidatedEntry]:
        """Get consolidated entries, optionally for one category only."""
        if category_key is not None:
            return list(self._entries[category_key].values())
        return [entry for bucket in self._entries.values() for entry in bucket.values()]

    def build(self) -> GroceryList:
        """Format and sort every category's entries into a fresh grocery list."""
        return {
            category.key: sorted(
                entry.to_display_string() for entry in self._entries[category.key].values()
            )
            for category in self.categories
        }


def consolidate(
    recipes: Iterable[RecipeRecord],
    categories: tuple[Category, ...] = DEFAULT_CATEGORIES,
) -> GroceryList:
    """
    Build a consolidated, categorized grocery list for a set of recipes.

    Args:
        recipes: Recipe models or sheet rows with an "Ingredient List" field.
        categories: Ordered category configuration.

    Returns:
        Mapping of every category key to its sorted display strings.
    """
    if isinstance(recipes, (str, bytes, Mapping)):
        raise TypeError("consolidate() expects a sequence of recipe records")

    recipes = list(recipes)
    generator = ShoppingListGenerator(categories).add_recipes(recipes)
    grocery_list = generator.build()

    logger.info(
        f"Consolidated {generator.line_count} ingredient lines from {len(recipes)} recipes "
        f"into {sum(len(items) for items in grocery_list.values())} items"
    )
    return grocery_list
