"""Unit tests for ingredient name normalization."""

import pytest

from mealplanner.normalize.names import (
    NORMALIZATION_STEPS,
    collapse_whitespace,
    normalize_ingredient_name,
    remove_qualifiers,
    singularize,
    singularize_last_word,
    strip_parentheticals,
    truncate_at_comma,
)


class TestNormalizationSteps:
    """Tests for the individual text transforms."""

    def test_strip_parentheticals(self):
        assert strip_parentheticals("tomatoes (14 oz) drained") == "tomatoes  drained"
        assert strip_parentheticals("rice (optional) (brown)") == "rice  "

    def test_truncate_at_comma(self):
        assert truncate_at_comma("basil, chopped, packed") == "basil"
        assert truncate_at_comma("basil") == "basil"

    def test_remove_qualifiers(self):
        assert collapse_whitespace(remove_qualifiers("diced peeled potatoes")) == "potatoes"
        assert collapse_whitespace(remove_qualifiers("salt to taste")) == "salt"

    def test_remove_qualifiers_whole_words_only(self):
        """Test that 'freshly' survives although it contains 'fresh'."""
        assert remove_qualifiers("freshly ground pepper") == "freshly ground pepper"

    def test_collapse_whitespace(self):
        assert collapse_whitespace("  green   onion \t") == "green onion"

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("onions", "onion"),
            ("eggs", "egg"),
            ("tomatoes", "tomato"),
            ("berries", "berry"),
            ("peaches", "peach"),
            ("radishes", "radish"),
            ("peas", "pea"),
            ("basil", "basil"),
            ("hummus", "hummus"),
            ("molasses", "molasses"),
            ("swiss", "swiss"),
            ("gas", "gas"),
            ("leaves", "leaf"),
        ],
    )
    def test_singularize(self, word, expected):
        assert singularize(word) == expected

    def test_singularize_last_word(self):
        assert singularize_last_word("green onions") == "green onion"
        assert singularize_last_word("eggs") == "egg"
        assert singularize_last_word("") == ""

    def test_steps_are_ordered(self):
        """Test that the pipeline lowercases first and singularizes last."""
        assert NORMALIZATION_STEPS[0]("ABC") == "abc"
        assert NORMALIZATION_STEPS[-1] is singularize_last_word


class TestNormalizeIngredientName:
    """Tests for normalize_ingredient_name function."""

    def test_lowercase(self):
        assert normalize_ingredient_name("Chicken Breast") == "chicken breast"

    def test_remove_descriptors(self):
        assert normalize_ingredient_name("fresh basil") == "basil"
        assert normalize_ingredient_name("dried oregano") == "oregano"
        assert normalize_ingredient_name("Whole Milk") == "milk"

    def test_multiple_descriptors(self):
        assert normalize_ingredient_name("chopped fresh basil") == "basil"

    def test_trailing_clause_and_parentheses(self):
        assert normalize_ingredient_name("basil, chopped") == "basil"
        assert normalize_ingredient_name("onions (about 2)") == "onion"
        assert normalize_ingredient_name("black pepper, or more to taste") == "black pepper"

    def test_phrase_qualifiers(self):
        assert normalize_ingredient_name("salt to taste") == "salt"
        assert normalize_ingredient_name("approximately 2 carrots") == "2 carrot"

    def test_equivalent_phrasings_collapse(self):
        """Test that differently phrased mentions share a comparison key."""
        assert normalize_ingredient_name("chopped fresh basil") == normalize_ingredient_name(
            "Basil, chopped"
        )
        assert normalize_ingredient_name("eggs") == normalize_ingredient_name("egg")

    def test_empty(self):
        assert normalize_ingredient_name("") == ""
        assert normalize_ingredient_name("(optional)") == ""

    def test_deterministic(self):
        phrase = "Diced Tomatoes (canned), drained"
        assert normalize_ingredient_name(phrase) == normalize_ingredient_name(phrase)
        assert normalize_ingredient_name(phrase) == "tomato"
