# recipe_bridge/models/recipe.py
from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_CUISINE = "Indian"
DEFAULT_DISH_TYPE = "Curry"
DEFAULT_SPICE_LEVEL = "Mild"


class AvailableIngredient(BaseModel):
    name: str
    quantity: Optional[str] = None


class RecipePreferences(BaseModel):
    """Request after defaults have been applied."""

    cuisine: str = DEFAULT_CUISINE
    dish_type: str = DEFAULT_DISH_TYPE
    spice_level: str = DEFAULT_SPICE_LEVEL
    dietary_restrictions: Optional[List[str]] = None
    available_ingredients: Optional[List[AvailableIngredient]] = None
    user_prompt: str = ""


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecipeIngredient(_CamelModel):
    name: str
    amount: str


class Recipe(_CamelModel):
    """Shape the model is asked to produce and the API returns."""

    name: str
    description: str
    cuisine: Optional[str] = None
    dish_type: Optional[str] = None
    servings: Optional[int] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
