"""API routers for the mealplanner application."""

from mealplanner.routers.meal_plans import router as meal_plans_router

__all__ = [
    "meal_plans_router",
]
