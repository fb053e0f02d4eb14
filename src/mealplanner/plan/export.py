"""Plain-text rendering of meal plans and grocery lists."""

from mealplanner.plan.categories import DEFAULT_CATEGORIES, Category
from mealplanner.plan.selection import MealPlan
from mealplanner.plan.shopping_list import GroceryList

RULE_WIDTH = 60


def _banner(title: str) -> list[str]:
    return ["=" * RULE_WIDTH, title, "=" * RULE_WIDTH, ""]


def render_grocery_list_text(
    grocery_list: GroceryList,
    categories: tuple[Category, ...] = DEFAULT_CATEGORIES,
) -> str:
    """Render non-empty categories with a header line and one checkbox per item."""
    lines: list[str] = []

    for category in categories:
        items = grocery_list.get(category.key) or []
        if not items:
            continue

        lines.append(f"{category.icon} {category.name.upper()}")
        lines.append("-" * RULE_WIDTH)
        lines.extend(f"  ☐ {item}" for item in items)
        lines.append("")

    return "\n".join(lines)


def render_plan_text(plan: MealPlan) -> str:
    """
    Render a full meal plan: one block per night, then the grocery list.

    This is the format used for copying a plan to the clipboard or printing.
    """
    lines = _banner("YOUR MEAL PLAN")

    for night, meal in enumerate(plan.meals, start=1):
        lines.append(f"Night {night}: {meal.name}")
        lines.append("-" * RULE_WIDTH)

        ingredients = meal.ingredients
        if ingredients:
            lines.append("Ingredients:")
            lines.extend(f"  • {ingredient}" for ingredient in ingredients)

        if meal.has_recipe_link:
            lines.append(f"Recipe: {meal.recipe_link}")

        lines.append("")

    lines.append("")
    lines.extend(_banner("GROCERY LIST"))

    return "\n".join(lines) + "\n" + render_grocery_list_text(plan.grocery_list, plan.categories)
