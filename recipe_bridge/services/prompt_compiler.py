# recipe_bridge/services/prompt_compiler.py
from __future__ import annotations

from typing import List

from recipe_bridge.models.recipe import DEFAULT_SPICE_LEVEL, AvailableIngredient, RecipePreferences

CLOSING_INSTRUCTION = (
    "Create an amazing recipe that would be perfect for this request. "
    "Use whatever ingredients work best - if I mentioned having certain ingredients available, "
    "feel free to incorporate them if they fit well, but don't limit yourself to only those "
    "ingredients. Focus on making the best possible dish.\n"
    "\n"
    "Give the recipe a simple, appetizing name (2-3 words)."
)


def _spicing(spice_level: str) -> str:
    # The default level is never mentioned
    if not spice_level or spice_level == DEFAULT_SPICE_LEVEL:
        return ""
    return f" with {spice_level.lower()} spicing"


def _ingredient_label(ing: AvailableIngredient) -> str:
    if ing.quantity:
        return f"{ing.name} ({ing.quantity})"
    return ing.name


def compile_prompt(prefs: RecipePreferences) -> str:
    sections: List[str] = [
        f"Create a delicious {prefs.cuisine} {prefs.dish_type} recipe{_spicing(prefs.spice_level)}."
    ]

    if prefs.dietary_restrictions:
        sections.append(f"Requirements: {', '.join(prefs.dietary_restrictions)}")

    if prefs.available_ingredients:
        labels = ", ".join(_ingredient_label(i) for i in prefs.available_ingredients)
        sections.append(f"Ingredients I have available: {labels}")

    sections.append(f"Request: {prefs.user_prompt}")
    sections.append(CLOSING_INSTRUCTION)

    return "\n\n".join(sections)
