"""Pydantic schemas for recipe records read from the recipe sheet."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_RECIPE_LINK = "No formal recipe"


def split_ingredient_lines(ingredient_text: str | None) -> list[str]:
    """Split an ingredient block on newlines into trimmed, non-empty lines."""
    if not ingredient_text:
        return []
    lines = ingredient_text.replace("\r\n", "\n").split("\n")
    return [line.strip() for line in lines if line.strip()]


class Recipe(BaseModel):
    """A meal with its newline-separated ingredient block.

    Accepts the sheet's column headers ("Meal Name", "Ingredient List",
    "Recipe Link (if relevant)") or the field names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    name: str = Field(default="Unknown Meal", alias="Meal Name")
    ingredient_list: str = Field(default="", alias="Ingredient List")
    recipe_link: str | None = Field(default=None, alias="Recipe Link (if relevant)")

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, v: Any) -> str:
        """Ensure name is never None or empty."""
        if not v or not str(v).strip():
            return "Unknown Meal"
        return str(v).strip()

    @field_validator("ingredient_list", mode="before")
    @classmethod
    def coerce_ingredient_list(cls, v: Any) -> str:
        """Treat a missing ingredient block as no ingredients."""
        if v is None:
            return ""
        return str(v)

    @field_validator("recipe_link", mode="before")
    @classmethod
    def coerce_recipe_link(cls, v: Any) -> str | None:
        if v is None:
            return None
        return str(v).strip() or None

    @property
    def ingredients(self) -> list[str]:
        """Get the ingredient lines of this recipe."""
        return split_ingredient_lines(self.ingredient_list)

    @property
    def has_recipe_link(self) -> bool:
        """Check if the recipe points at an actual recipe page."""
        return bool(self.recipe_link) and self.recipe_link != NO_RECIPE_LINK
