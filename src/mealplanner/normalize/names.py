"""Ingredient name normalization for consolidation."""

import re
from collections.abc import Callable

# Words that describe preparation rather than what to buy
QUALIFIERS: tuple[str, ...] = (
    "fresh",
    "dried",
    "chopped",
    "diced",
    "sliced",
    "minced",
    "peeled",
    "shredded",
    "grated",
    "crushed",
    "whole",
    "halved",
    "quartered",
    "optional",
    "to taste",
    "or more",
    "about",
    "approximately",
)

# Nouns ending in "s" that are already singular
INVARIANT_NOUNS: frozenset[str] = frozenset({"brussels", "grits", "molasses", "oats"})

IRREGULAR_PLURALS: dict[str, str] = {
    "leaves": "leaf",
    "halves": "half",
    "loaves": "loaf",
}

_PARENTHETICAL_RE = re.compile(r"\(.*?\)")
_QUALIFIER_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(q) for q in QUALIFIERS) + r")\b",
    re.IGNORECASE,
)


def lowercase(name: str) -> str:
    return name.lower()


def strip_parentheticals(name: str) -> str:
    """Remove "(...)" notes, e.g. "tomatoes (14 oz)" -> "tomatoes "."""
    return _PARENTHETICAL_RE.sub("", name)


def truncate_at_comma(name: str) -> str:
    """Drop trailing clauses, e.g. "basil, chopped" -> "basil"."""
    return name.split(",", 1)[0]


def remove_qualifiers(name: str) -> str:
    return _QUALIFIER_RE.sub("", name)


def collapse_whitespace(name: str) -> str:
    return " ".join(name.split())


def singularize(word: str) -> str:
    """Reduce a plural word to its singular form with simple suffix rules."""
    if len(word) <= 3 or word in INVARIANT_NOUNS:
        return word
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("oes"):
        return word[:-2]
    if word.endswith(("ches", "shes", "xes")):
        return word[:-2]
    if word.endswith(("ss", "us", "is")) or not word.endswith("s"):
        return word
    return word[:-1]


def singularize_last_word(name: str) -> str:
    """Singularize the head noun, e.g. "green onions" -> "green onion"."""
    head, _, last = name.rpartition(" ")
    if not last:
        return name
    singular = singularize(last)
    return f"{head} {singular}" if head else singular


# Applied left to right; each step is a pure str -> str function
NORMALIZATION_STEPS: tuple[Callable[[str], str], ...] = (
    lowercase,
    strip_parentheticals,
    truncate_at_comma,
    remove_qualifiers,
    collapse_whitespace,
    singularize_last_word,
)


def normalize_ingredient_name(name: str) -> str:
    """
    Normalize an ingredient item phrase into a comparison key.

    - Lowercase
    - Remove parenthetical notes and anything after the first comma
    - Remove preparation qualifiers (fresh, chopped, to taste, ...)
    - Collapse whitespace
    - Singularize the last word

    Examples:
        "chopped fresh basil" -> "basil"
        "Basil, chopped" -> "basil"
        "onions (about 2)" -> "onion"
    """
    if not name:
        return ""

    for step in NORMALIZATION_STEPS:
        name = step(name)

    return name
