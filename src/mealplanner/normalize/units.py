"""Quantity and unit parsing, normalization and display utilities."""

import math
import re
from dataclasses import dataclass

# =============================================================================
# Unit Tables
# =============================================================================

# Recognized unit spellings -> canonical short form
UNIT_ALIASES: dict[str, str] = {
    "cup": "cup",
    "cups": "cup",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tbsp": "tbsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    "clove": "clove",
    "cloves": "clove",
    "can": "can",
    "cans": "can",
    "jar": "jar",
    "jars": "jar",
    # Size descriptors are counted as their own unit
    "medium": "medium",
    "large": "large",
    "small": "small",
}

# Longest spellings first so "tablespoons" wins over "tablespoon"
_UNIT_ALTERNATION = "|".join(
    re.escape(unit) for unit in sorted(UNIT_ALIASES, key=len, reverse=True)
)

# Leading quantity ("2", "1.5", "1/2", "1 1/2") with an optional unit word
QUANTITY_PREFIX_RE = re.compile(
    rf"^(?P<quantity>\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?)"
    rf"\s*(?:(?P<unit>{_UNIT_ALTERNATION})\b\.?)?",
    re.IGNORECASE,
)

# Common culinary fractions used when displaying quantities
SNAP_FRACTIONS: tuple[tuple[float, str], ...] = (
    (1 / 4, "1/4"),
    (1 / 3, "1/3"),
    (1 / 2, "1/2"),
    (2 / 3, "2/3"),
    (3 / 4, "3/4"),
)
SNAP_TOLERANCE = 0.005
WHOLE_EPSILON = 1e-6


@dataclass(frozen=True)
class ParsedIngredient:
    """An ingredient line split into quantity, unit and item phrase."""

    quantity: str | None
    unit: str
    item: str
    original: str

    @property
    def has_quantity(self) -> bool:
        """Check if a leading quantity token was found."""
        return self.quantity is not None


# =============================================================================
# Parsing Functions
# =============================================================================


def extract_quantity_and_unit(line: str) -> ParsedIngredient:
    """
    Split an ingredient line into quantity, unit and item.

    Only a quantity anchored at the start of the line counts. Examples:
        "2 cups flour" -> ("2", "cups", "flour")
        "1/2 lb ground beef" -> ("1/2", "lb", "ground beef")
        "3 eggs" -> ("3", "", "eggs")
        "salt to taste" -> (None, "", "salt to taste")
    """
    text = line.strip()
    match = QUANTITY_PREFIX_RE.match(text)

    if not match:
        return ParsedIngredient(quantity=None, unit="", item=text, original=line)

    return ParsedIngredient(
        quantity=" ".join(match.group("quantity").split()),
        unit=match.group("unit") or "",
        item=text[match.end() :].strip(),
        original=line,
    )


def parse_quantity_string(quantity_str: str | None) -> float | None:
    """
    Parse a quantity token into a float.

    Handles "2", "1.5", "1/2" and mixed numbers like "1 1/2". Returns None
    when the token is missing, malformed or does not give a finite value
    (e.g. a zero denominator, or a fraction too large for a float).
    """
    if not quantity_str:
        return None

    quantity_str = quantity_str.strip()

    mixed_match = re.fullmatch(r"(\d+)\s+(\d+)/(\d+)", quantity_str)
    frac_match = re.fullmatch(r"(\d+)/(\d+)", quantity_str)
    if mixed_match or frac_match:
        groups = mixed_match.groups() if mixed_match else ("0", *frac_match.groups())
        # int() rejects overlong digit strings and int division overflows past float range
        try:
            whole, num, denom = (int(g) for g in groups)
            if denom == 0:
                return None
            return whole + num / denom
        except (ValueError, OverflowError):
            return None

    try:
        value = float(quantity_str)
    except ValueError:
        return None

    return value if math.isfinite(value) else None


def normalize_unit(unit: str | None) -> str:
    """
    Map a unit spelling to its canonical short form.

    Unknown units pass through lower-cased; a missing unit becomes "".
    """
    if not unit:
        return ""
    key = unit.strip().lower()
    return UNIT_ALIASES.get(key, key)


# =============================================================================
# Display
# =============================================================================


def snap_fraction(remainder: float) -> str | None:
    """Return the culinary fraction closest to ``remainder``, if any is close enough."""
    for value, label in SNAP_FRACTIONS:
        if abs(remainder - value) <= SNAP_TOLERANCE:
            return label
    return None


def format_quantity(quantity: float) -> str:
    """
    Render a quantity for display, snapping to common fractions.

    Examples:
        3.0 -> "3"
        0.5 -> "1/2"
        2.5 -> "2 1/2"
        0.6 -> "0.60"
    """
    if not math.isfinite(quantity):
        return str(quantity)

    whole = math.floor(quantity)
    remainder = quantity - whole

    if remainder < WHOLE_EPSILON:
        return str(whole)
    if remainder > 1 - WHOLE_EPSILON:
        return str(whole + 1)

    fraction = snap_fraction(remainder)
    if fraction is None:
        return f"{quantity:.2f}"
    if whole == 0:
        return fraction
    return f"{whole} {fraction}"
