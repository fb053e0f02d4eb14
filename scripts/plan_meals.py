"""Script to generate a random meal plan and print it with its grocery list.

Run with: uv run python scripts/plan_meals.py --meals 5
Consolidate a local CSV export instead of the published sheet:
    uv run python scripts/plan_meals.py --csv recipes.csv --meals 5
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

from mealplanner.config import get_settings
from mealplanner.ingest.connectors.base import ConnectorError
from mealplanner.ingest.connectors.sheets import SheetConnector, parse_recipes_csv
from mealplanner.ingest.schemas import Recipe
from mealplanner.logging_config import configure_logging, get_logger
from mealplanner.plan.export import render_plan_text
from mealplanner.plan.selection import MealPlan

logger = get_logger(__name__)


async def load_recipes(csv_path: str | None) -> list[Recipe]:
    """Load recipes from a local CSV file or the configured sheet."""
    if csv_path:
        return parse_recipes_csv(Path(csv_path).read_text(encoding="utf-8"))

    async with SheetConnector() as connector:
        return await connector.fetch_recipes()


def main():
    parser = argparse.ArgumentParser(description="Plan random dinners and print a grocery list")
    parser.add_argument("--meals", "-m", type=int, default=7, help="Number of dinners to plan")
    parser.add_argument("--csv", "-c", type=str, help="Read recipes from a local CSV export")
    parser.add_argument("--seed", "-s", type=int, help="Random seed for a repeatable plan")

    args = parser.parse_args()
    configure_logging(log_level="WARNING")

    max_meals = get_settings().max_meals
    if not 1 <= args.meals <= max_meals:
        parser.error(f"--meals must be between 1 and {max_meals}")

    try:
        recipes = asyncio.run(load_recipes(args.csv))
    except ConnectorError as e:
        logger.error(f"Failed to load recipes: {e}")
        sys.exit(1)

    if not recipes:
        print("No recipes found.")
        sys.exit(1)

    rng = random.Random(args.seed) if args.seed is not None else None
    plan = MealPlan.generate(recipes, args.meals, rng=rng)
    print(render_plan_text(plan))


if __name__ == "__main__":
    main()
