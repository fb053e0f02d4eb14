"""Recipe data ingestion from the published recipe sheet."""

from mealplanner.ingest.schemas import Recipe, split_ingredient_lines

__all__ = [
    "Recipe",
    "split_ingredient_lines",
]
