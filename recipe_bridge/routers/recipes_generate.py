# recipe_bridge/routers/recipes_generate.py
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from recipe_bridge.clients.ollama import ollama
from recipe_bridge.services import recipes_generate
from recipe_bridge.services.generation import OllamaRecipeGenerator, RecipeGenerator

router = APIRouter(prefix="/api", tags=["recipe"])


def get_recipe_generator() -> RecipeGenerator:
    return OllamaRecipeGenerator(ollama)


@router.post("/generate-recipe")
async def generate_recipe(
    request: Request,
    generator: RecipeGenerator = Depends(get_recipe_generator),
) -> Dict[str, Any]:
    # Body is parsed inside the service so a malformed one fails like a generation error
    return await recipes_generate.generate_recipe(request.json, generator=generator)
