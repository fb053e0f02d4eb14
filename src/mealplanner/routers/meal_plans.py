"""API routes for meal plans and grocery lists."""

import uuid
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from mealplanner.config import get_settings
from mealplanner.ingest.connectors.base import ConnectorError
from mealplanner.ingest.connectors.sheets import SheetConnector
from mealplanner.ingest.schemas import Recipe
from mealplanner.logging_config import LoggingContext, get_logger
from mealplanner.plan.categories import DEFAULT_CATEGORIES
from mealplanner.plan.export import render_plan_text
from mealplanner.plan.selection import MealPlan, NoAlternativeMealsError
from mealplanner.plan.shopping_list import consolidate

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["meal-plans"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class CategoryInfo(BaseModel):
    """Display information for a grocery list category."""

    key: str
    name: str
    icon: str


class GroceryListRequest(BaseModel):
    """Recipes to consolidate into a grocery list."""

    recipes: list[Recipe] = Field(default_factory=list)


class GroceryListResponse(BaseModel):
    """Grocery list keyed by category, with categories in display order."""

    grocery_list: dict[str, list[str]]
    categories: list[CategoryInfo]


class MealPlanCreateRequest(BaseModel):
    """Request to generate a new random meal plan."""

    count: int = Field(default=7, ge=1, description="Number of dinners to plan")


class MealSwapRequest(BaseModel):
    """Request to swap one meal of an existing plan."""

    meals: list[Recipe] = Field(min_length=1)
    index: int = Field(ge=0, description="Position of the meal to replace")


class MealPlanExportRequest(BaseModel):
    """Meals to render as a plain-text plan."""

    meals: list[Recipe] = Field(default_factory=list)


class MealPlanResponse(BaseModel):
    """Meal plan with its consolidated grocery list."""

    id: str
    meals: list[Recipe]
    grocery_list: dict[str, list[str]]
    categories: list[CategoryInfo]


# =============================================================================
# Helper Functions
# =============================================================================


def category_info() -> list[CategoryInfo]:
    return [CategoryInfo(key=c.key, name=c.name, icon=c.icon) for c in DEFAULT_CATEGORIES]


def plan_response(plan_id: str, plan: MealPlan) -> MealPlanResponse:
    return MealPlanResponse(
        id=plan_id,
        meals=plan.meals,
        grocery_list=plan.grocery_list,
        categories=category_info(),
    )


async def get_sheet_connector() -> AsyncIterator[SheetConnector]:
    """Provide a recipe sheet connector for the duration of a request."""
    async with SheetConnector() as connector:
        yield connector


async def load_recipes(connector: SheetConnector) -> list[Recipe]:
    """Fetch recipes, translating connector failures into HTTP errors."""
    try:
        recipes = await connector.fetch_recipes()
    except ConnectorError as e:
        logger.error(f"Failed to load recipes: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to load recipes from the recipe sheet",
        ) from e

    if not recipes:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="The recipe sheet contains no recipes",
        )
    return recipes


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/grocery-list", response_model=GroceryListResponse)
async def create_grocery_list(request: GroceryListRequest) -> GroceryListResponse:
    """Consolidate the ingredients of the given recipes into a grocery list."""
    return GroceryListResponse(
        grocery_list=consolidate(request.recipes),
        categories=category_info(),
    )


@router.post(
    "/meal-plans",
    response_model=MealPlanResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_meal_plan(
    request: MealPlanCreateRequest,
    connector: SheetConnector = Depends(get_sheet_connector),
) -> MealPlanResponse:
    """
    Generate a random meal plan from the recipe sheet.

    Picks ``count`` distinct recipes (fewer if the sheet is smaller) and
    builds the consolidated grocery list for them.
    """
    max_meals = get_settings().max_meals
    if request.count > max_meals:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Please choose between 1 and {max_meals} meals",
        )

    plan_id = str(uuid.uuid4())
    with LoggingContext(plan_id=plan_id):
        logger.info(f"Creating meal plan with {request.count} meals")
        recipes = await load_recipes(connector)
        plan = MealPlan.generate(recipes, request.count)

    return plan_response(plan_id, plan)


@router.post("/meal-plans/swap", response_model=MealPlanResponse)
async def swap_meal(
    request: MealSwapRequest,
    connector: SheetConnector = Depends(get_sheet_connector),
) -> MealPlanResponse:
    """Replace one meal with a recipe not yet in the plan and rebuild the grocery list."""
    plan_id = str(uuid.uuid4())
    with LoggingContext(plan_id=plan_id):
        recipes = await load_recipes(connector)
        plan = MealPlan.from_meals(request.meals)

        try:
            plan.swap(request.index, recipes)
        except IndexError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e),
            ) from e
        except NoAlternativeMealsError as e:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=str(e),
            ) from e

    return plan_response(plan_id, plan)


@router.post("/meal-plans/export", response_class=PlainTextResponse)
async def export_meal_plan(request: MealPlanExportRequest) -> PlainTextResponse:
    """Render meals and their grocery list as plain text for printing or copying."""
    plan = MealPlan.from_meals(request.meals)
    return PlainTextResponse(render_plan_text(plan))
