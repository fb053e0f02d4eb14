"""Meal plan selection and grocery list consolidation."""

from mealplanner.plan.categories import (
    DEFAULT_CATEGORIES,
    Category,
    categorize_ingredient,
)
from mealplanner.plan.export import render_grocery_list_text, render_plan_text
from mealplanner.plan.selection import (
    MealPlan,
    MealPlanError,
    NoAlternativeMealsError,
    select_meals,
)
from mealplanner.plan.shopping_list import (
    ConsolidatedEntry,
    GroceryList,
    ShoppingListGenerator,
    consolidate,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "Category",
    "ConsolidatedEntry",
    "GroceryList",
    "MealPlan",
    "MealPlanError",
    "NoAlternativeMealsError",
    "ShoppingListGenerator",
    "categorize_ingredient",
    "consolidate",
    "render_grocery_list_text",
    "render_plan_text",
    "select_meals",
]
