"""Unit tests for grocery list consolidation."""

import copy
import logging

import pytest

from mealplanner.ingest.schemas import Recipe
from mealplanner.plan.categories import DEFAULT_CATEGORIES, Category
from mealplanner.plan.shopping_list import (
    ConsolidatedEntry,
    ShoppingListGenerator,
    consolidate,
    recipe_ingredient_lines,
)


def rows(*ingredient_lists: str) -> list[dict[str, str]]:
    """Build sheet rows from ingredient blocks."""
    return [
        {"Meal Name": f"Meal {i}", "Ingredient List": text}
        for i, text in enumerate(ingredient_lists, start=1)
    ]


# =============================================================================
# Entry Display Tests
# =============================================================================


class TestConsolidatedEntry:
    """Tests for ConsolidatedEntry display formatting."""

    def test_display_with_unit(self):
        entry = ConsolidatedEntry(
            category="dairy",
            name="milk",
            unit="cup",
            original_unit="cups",
            quantity=3.0,
            has_quantity=True,
            sources=["2 cups milk", "1 cup milk"],
        )
        assert entry.to_display_string() == "3 cup milk"
        assert entry.key == ("dairy", "milk", "cup")

    def test_display_without_unit(self):
        entry = ConsolidatedEntry(
            category="vegetables", name="onion", unit="", quantity=4.0, has_quantity=True
        )
        assert entry.to_display_string() == "4 onion"

    def test_display_fraction(self):
        entry = ConsolidatedEntry(
            category="pantry", name="sugar", unit="cup", quantity=2.5, has_quantity=True
        )
        assert entry.to_display_string() == "2 1/2 cup sugar"

    def test_display_without_quantity(self):
        entry = ConsolidatedEntry(category="pantry", name="salt", unit="", sources=["Salt"])
        assert entry.to_display_string() == "salt"

    def test_display_without_quantity_many_recipes(self):
        entry = ConsolidatedEntry(
            category="pantry",
            name="salt",
            unit="",
            sources=["Salt", "salt to taste", "Salt"],
        )
        assert entry.to_display_string() == "salt (needed for 3 recipes)"


# =============================================================================
# Consolidation Tests
# =============================================================================


class TestConsolidate:
    """Tests for consolidate function."""

    def test_round_trip(self, milk_and_onion_rows):
        """Test milk and onions merge across two recipes."""
        grocery_list = consolidate(milk_and_onion_rows)

        assert grocery_list["dairy"] == ["3 cup milk"]
        assert grocery_list["vegetables"] == ["4 onion"]

    def test_all_categories_present_in_order(self, milk_and_onion_rows):
        grocery_list = consolidate(milk_and_onion_rows)

        assert list(grocery_list) == [c.key for c in DEFAULT_CATEGORIES]
        assert grocery_list["pantry"] == []
        assert grocery_list["frozen"] == []

    def test_equivalent_phrasings_merge(self):
        """Test that qualifiers and trailing clauses do not split entries."""
        grocery_list = consolidate(rows("2 cups chopped fresh basil", "2 cup basil, chopped"))

        assert grocery_list["herbs"] == ["4 cup basil"]

    def test_fractions_sum(self):
        grocery_list = consolidate(rows("1/2 cup sugar", "1/4 cup sugar\n1 1/2 cups sugar"))

        assert grocery_list["pantry"] == ["2 1/4 cup sugar"]

    def test_different_units_do_not_merge(self):
        grocery_list = consolidate(rows("1 cup milk", "8 oz milk"))

        assert grocery_list["dairy"] == ["1 cup milk", "8 oz milk"]

    def test_unitless_quantities_merge(self):
        """Test that '3 eggs' merges with other unit-less egg mentions."""
        grocery_list = consolidate(rows("3 eggs", "2 egg\neggs"))

        assert grocery_list["proteins"] == ["5 egg"]

    def test_no_quantity_counted_for_multiplicity(self):
        grocery_list = consolidate(rows("Salt to taste", "Salt", "salt, to taste"))

        assert grocery_list["pantry"] == ["salt (needed for 3 recipes)"]

    def test_single_mention_without_quantity(self):
        grocery_list = consolidate(rows("Salt to taste"))

        assert grocery_list["pantry"] == ["salt"]

    def test_sorted_lexicographically(self):
        grocery_list = consolidate(rows("2 cups flour\nsalt", "10 oz pasta"))

        assert grocery_list["pantry"] == ["10 oz pasta", "2 cup flour", "salt"]

    def test_missing_or_empty_ingredient_list(self):
        records = [
            {"Meal Name": "Nothing"},
            {"Meal Name": "Blank", "Ingredient List": ""},
            {"Meal Name": "None", "Ingredient List": None},
            {"Meal Name": "Whitespace", "Ingredient List": "\n  \n"},
        ]
        grocery_list = consolidate(records)

        assert all(items == [] for items in grocery_list.values())
        assert len(grocery_list) == len(DEFAULT_CATEGORIES)

    def test_no_recipes(self):
        assert consolidate([]) == {c.key: [] for c in DEFAULT_CATEGORIES}

    def test_recipe_models(self, sample_recipes):
        grocery_list = consolidate(sample_recipes)

        assert grocery_list["dairy"] == [
            "1 cup cheddar",
            "1/2 cup sour cream",
            "1/4 cup milk",
        ]
        assert grocery_list["herbs"] == ["1/4 cup basil"]
        assert grocery_list["proteins"] == ["1 lb chicken breast", "3 egg"]
        assert grocery_list["vegetables"] == ["1 small onion", "2 can tomato", "3 clove garlic"]
        assert grocery_list["pantry"] == [
            "1 lb spaghetti",
            "8 tortilla",
            "salt (needed for 3 recipes)",
        ]

    def test_idempotent(self, sample_recipes):
        assert consolidate(sample_recipes) == consolidate(sample_recipes)

    def test_input_not_mutated(self, milk_and_onion_rows):
        before = copy.deepcopy(milk_and_onion_rows)
        consolidate(milk_and_onion_rows)
        assert milk_and_onion_rows == before

    def test_zero_denominator_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            grocery_list = consolidate(rows("1/0 cup flour"))

        assert grocery_list["pantry"] == ["flour"]
        assert "Ignoring unusable quantity" in caplog.text

    def test_oversized_fraction_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            grocery_list = consolidate(rows("1" + "0" * 400 + "/1 cup flour"))

        assert grocery_list["pantry"] == ["flour"]
        assert "Ignoring unusable quantity" in caplog.text

    def test_overflowing_total_keeps_finite_quantity(self, caplog):
        """Test that a line which would push the total past float range is not summed."""
        big = "1" + "0" * 308
        with caplog.at_level(logging.WARNING):
            grocery_list = consolidate(rows(f"{big} cup flour", f"{big} cup flour"))

        assert grocery_list["pantry"] == [f"{int(float(big))} cup flour"]
        assert "total would overflow" in caplog.text

    def test_substitute_categories(self):
        categories = (
            Category(key="snacks", name="Snacks", icon="🍿", keywords=("chip",)),
            Category(key="other", name="Other", icon="🛒"),
        )
        grocery_list = consolidate(rows("1 bag chips\n2 cups milk"), categories)

        assert grocery_list == {"snacks": ["1 bag chip"], "other": ["2 cup milk"]}

    def test_rejects_non_sequence(self):
        with pytest.raises(TypeError):
            consolidate("2 cups milk")
        with pytest.raises(TypeError):
            consolidate({"Meal Name": "A", "Ingredient List": "milk"})


class TestShoppingListGenerator:
    """Tests for the accumulating ShoppingListGenerator."""

    def test_entry_provenance(self, milk_and_onion_rows):
        generator = ShoppingListGenerator().add_recipes(milk_and_onion_rows)

        [milk] = generator.entries("dairy")
        assert milk.name == "milk"
        assert milk.unit == "cup"
        assert milk.original_unit == "cups"
        assert milk.quantity == 3.0
        assert milk.has_quantity
        assert milk.sources == ["2 cups milk", "1 cup milk"]

    def test_entry_without_quantity(self):
        generator = ShoppingListGenerator()
        entry = generator.add_line("Salt to taste")

        assert entry.has_quantity is False
        assert entry.quantity == 0
        assert entry.key == ("pantry", "salt", "")

    def test_line_count_and_entries(self, sample_recipes):
        generator = ShoppingListGenerator().add_recipes(sample_recipes)

        assert generator.line_count == 14
        assert len(generator.entries()) == 12

    def test_each_generator_has_own_state(self):
        first = ShoppingListGenerator()
        first.add_line("2 cups milk")
        second = ShoppingListGenerator()

        assert second.build()["dairy"] == []
        assert first.build()["dairy"] == ["2 cup milk"]

    def test_build_returns_fresh_lists(self):
        generator = ShoppingListGenerator()
        generator.add_line("2 cups milk")
        grocery_list = generator.build()
        grocery_list["dairy"].append("tampered")

        assert generator.build()["dairy"] == ["2 cup milk"]

    def test_requires_fallback_category(self):
        with pytest.raises(ValueError):
            ShoppingListGenerator((Category(key="x", name="X", icon="", keywords=("a",)),))


class TestRecipeIngredientLines:
    """Tests for recipe_ingredient_lines function."""

    def test_recipe_model(self):
        recipe = Recipe(name="A", ingredient_list=" 2 cups milk \n\n1 onion\n")
        assert recipe_ingredient_lines(recipe) == ["2 cups milk", "1 onion"]

    def test_mapping(self):
        assert recipe_ingredient_lines({"Ingredient List": "a\r\nb"}) == ["a", "b"]

    def test_unsupported_record(self):
        with pytest.raises(TypeError):
            recipe_ingredient_lines(42)
