# recipe_bridge/services/preferences.py
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from recipe_bridge.models.recipe import (
    DEFAULT_CUISINE,
    DEFAULT_DISH_TYPE,
    DEFAULT_SPICE_LEVEL,
    AvailableIngredient,
    RecipePreferences,
)


def _text_or_default(value: Any, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _restrictions(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    out = [x for x in value if isinstance(x, str)]
    return out or None


def _quantity(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # A zero quantity reads as "no quantity given"
        return str(value) if value else None
    if isinstance(value, str) and value:
        return value
    return None


def _ingredients(value: Any) -> Optional[List[AvailableIngredient]]:
    if not isinstance(value, list):
        return None

    out: List[AvailableIngredient] = []
    for ing in value:
        if not isinstance(ing, Mapping):
            continue
        name = ing.get("name")
        if not isinstance(name, str) or not name:
            continue
        out.append(AvailableIngredient(name=name, quantity=_quantity(ing.get("quantity"))))

    return out or None


def _user_prompt(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def normalize_request(body: Any) -> RecipePreferences:
    """
    Build the canonical preference set from a raw request body.

    Permissive: anything missing or of the
    wrong shape falls back to its default (or to "none"), and userPrompt is
    never validated.
    """
    if not isinstance(body, Mapping):
        body = {}

    return RecipePreferences(
        cuisine=_text_or_default(body.get("cuisine"), DEFAULT_CUISINE),
        dish_type=_text_or_default(body.get("dishType"), DEFAULT_DISH_TYPE),
        spice_level=_text_or_default(body.get("spiceLevel"), DEFAULT_SPICE_LEVEL),
        dietary_restrictions=_restrictions(body.get("dietaryRestrictions")),
        available_ingredients=_ingredients(body.get("availableIngredients")),
        user_prompt=_user_prompt(body.get("userPrompt")),
    )
