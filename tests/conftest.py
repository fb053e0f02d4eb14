"""Pytest configuration and shared fixtures."""

import pytest

from mealplanner.ingest.schemas import Recipe

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require external services)"
    )


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def milk_and_onion_rows():
    """Two sheet rows sharing milk and onions in different spellings."""
    return [
        {"Meal Name": "A", "Ingredient List": "2 cups milk\n1 onion"},
        {"Meal Name": "B", "Ingredient List": "1 cup milk\n3 onions"},
    ]


@pytest.fixture
def sample_recipes():
    """A small recipe collection."""
    return [
        Recipe.model_validate(
            {
                "Meal Name": "Chicken Tacos",
                "Ingredient List": (
                    "1 lb chicken breast\n"
                    "8 tortillas\n"
                    "1 cup shredded cheddar\n"
                    "1/2 cup sour cream\n"
                    "Salt to taste"
                ),
                "Recipe Link (if relevant)": "https://example.com/tacos",
            }
        ),
        Recipe.model_validate(
            {
                "Meal Name": "Pasta Pomodoro",
                "Ingredient List": (
                    "1 lb spaghetti\n"
                    "2 cans crushed tomatoes\n"
                    "3 cloves garlic, minced\n"
                    "1/4 cup fresh basil, chopped\n"
                    "Salt to taste"
                ),
                "Recipe Link (if relevant)": "No formal recipe",
            }
        ),
        Recipe.model_validate(
            {
                "Meal Name": "Veggie Omelette",
                "Ingredient List": "3 eggs\n1/4 cup milk\n1 small onion, diced\nSalt",
            }
        ),
    ]


@pytest.fixture
def sample_csv():
    """CSV export of a recipe sheet, including rows that must be skipped."""
    return (
        "Meal Name,Ingredient List,Recipe Link (if relevant)\n"
        '"Tacos","1 lb ground beef\n8 tortillas",No formal recipe\n'
        ",orphan,\n"
        'Pasta,"1 lb pasta, dry\n2 cups tomato sauce",https://example.com/pasta\n'
        "Broken,row\n"
    )
