# recipe_bridge/services/recipes_generate.py
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict

from pydantic import BaseModel

from recipe_bridge.core.request_context import get_request_id
from recipe_bridge.models.recipe import Recipe
from recipe_bridge.services.generation import RecipeGenerator
from recipe_bridge.services.preferences import normalize_request
from recipe_bridge.services.prompt_compiler import compile_prompt

log = logging.getLogger("recipe_bridge.recipes")

FAILURE_MESSAGE = "Failed to generate recipe."


def recipe_payload(recipe: BaseModel) -> Dict[str, Any]:
    return recipe.model_dump(by_alias=True)


def failure_payload() -> Dict[str, Any]:
    return {"error": FAILURE_MESSAGE}


async def generate_recipe(
    read_body: Callable[[], Awaitable[Any]],
    *,
    generator: RecipeGenerator,
) -> Dict[str, Any]:
    """
    Turn a raw request body into a recipe payload.

    Every failure (unreadable body, unreachable model, invalid output)
    collapses into the same error payload; the cause only goes to the log.
    """
    try:
        body = await read_body()
        prefs = normalize_request(body)
        prompt = compile_prompt(prefs)
        recipe = await generator.generate(prompt, Recipe)
        return recipe_payload(recipe)
    except Exception:
        log.exception("Error generating recipe", extra={"request_id": get_request_id()})
        return failure_payload()
