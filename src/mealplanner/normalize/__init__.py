"""Parse and normalize free-text ingredient lines."""

from mealplanner.normalize.names import (
    NORMALIZATION_STEPS,
    QUALIFIERS,
    normalize_ingredient_name,
)
from mealplanner.normalize.units import (
    UNIT_ALIASES,
    ParsedIngredient,
    extract_quantity_and_unit,
    format_quantity,
    normalize_unit,
    parse_quantity_string,
    snap_fraction,
)

__all__ = [
    "NORMALIZATION_STEPS",
    "QUALIFIERS",
    "UNIT_ALIASES",
    "ParsedIngredient",
    "extract_quantity_and_unit",
    "format_quantity",
    "normalize_ingredient_name",
    "normalize_unit",
    "parse_quantity_string",
    "snap_fraction",
]
