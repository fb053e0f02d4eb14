"""Grocery aisle categories and keyword-based categorization."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A grocery list section with the keywords that route lines into it."""

    key: str
    name: str
    icon: str
    keywords: tuple[str, ...] = ()

    @property
    def is_fallback(self) -> bool:
        """A category without keywords catches everything else."""
        return not self.keywords

    def matches(self, lowered_line: str) -> bool:
        """Check if any keyword occurs in an already lower-cased line."""
        return any(keyword in lowered_line for keyword in self.keywords)


# Ordered: categorization is first match wins, and lists render in this order
DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(
        key="dairy",
        name="Dairy",
        icon="📦",
        keywords=(
            "milk",
            "cheese",
            "butter",
            "cream",
            "yogurt",
            "sour cream",
            "parmesan",
            "mozzarella",
            "cheddar",
            "feta",
            "ricotta",
            "cottage cheese",
        ),
    ),
    Category(
        key="fruit",
        name="Fruit",
        icon="🍎",
        keywords=(
            "apple",
            "banana",
            "orange",
            "lemon",
            "lime",
            "berry",
            "berries",
            "strawberry",
            "blueberry",
            "grape",
            "melon",
            "pear",
            "peach",
            "mango",
            "pineapple",
            "avocado",
        ),
    ),
    Category(
        key="vegetables",
        name="Vegetables",
        icon="🥕",
        keywords=(
            "lettuce",
            "tomato",
            "onion",
            "garlic",
            "pepper",
            "carrot",
            "celery",
            "cucumber",
            "broccoli",
            "cauliflower",
            "spinach",
            "kale",
            "cabbage",
            "zucchini",
            "squash",
            "potato",
            "sweet potato",
            "corn",
            "peas",
            "green beans",
            "asparagus",
            "mushroom",
            "eggplant",
            "radish",
        ),
    ),
    Category(
        key="herbs",
        name="Herbs & Spices",
        icon="🌿",
        keywords=(
            "basil",
            "parsley",
            "cilantro",
            "thyme",
            "rosemary",
            "oregano",
            "dill",
            "mint",
            "sage",
            "chives",
            "bay leaf",
        ),
    ),
    Category(
        key="proteins",
        name="Proteins",
        icon="🍗",
        keywords=(
            "chicken",
            "beef",
            "pork",
            "turkey",
            "fish",
            "salmon",
            "tuna",
            "shrimp",
            "lamb",
            "bacon",
            "sausage",
            "ham",
            "egg",
            "tofu",
            "beans",
            "lentils",
            "chickpeas",
            "ground beef",
            "ground turkey",
            "steak",
            "breast",
        ),
    ),
    Category(
        key="frozen",
        name="Frozen",
        icon="❄️",
        keywords=("frozen", "ice cream", "popsicle"),
    ),
    Category(key="pantry", name="Pantry Items", icon="🥫"),
)


def fallback_category(categories: tuple[Category, ...] = DEFAULT_CATEGORIES) -> Category:
    """Return the catch-all category of a configuration."""
    for category in categories:
        if category.is_fallback:
            return category
    raise ValueError("Category configuration has no fallback category (one without keywords)")


def categorize_ingredient(
    line: str,
    categories: tuple[Category, ...] = DEFAULT_CATEGORIES,
) -> Category:
    """
    Assign an ingredient line to a category.

    Categories are checked in configuration order and the first keyword found
    anywhere in the lower-cased line wins, so "chicken broth" lands in
    proteins and "butter lettuce" in dairy. Lines matching nothing go to the
    fallback category.
    """
    lowered = line.lower()

    for category in categories:
        if not category.is_fallback and category.matches(lowered):
            return category

    return fallback_category(categories)


def get_category(key: str, categories: tuple[Category, ...] = DEFAULT_CATEGORIES) -> Category:
    """Look up a category by key."""
    for category in categories:
        if category.key == key:
            return category
    raise KeyError(key)
