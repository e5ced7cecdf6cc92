# recipe_bridge/services/generation.py
from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel

from recipe_bridge.core import config
from recipe_bridge.core.text import extract_json

log = logging.getLogger("recipe_bridge.generation")

M = TypeVar("M", bound=BaseModel)

SYSTEM_RECIPE = """You are a recipe generator.

RULES:
- Output ONLY valid JSON matching the provided schema.
- Do NOT include markdown, comments, or explanations.
- Do NOT include text outside the JSON object.
- Ingredient amounts are short strings (e.g. "2 cups", "1 tsp").
- steps should be short imperative sentences.
"""


class GenerationError(Exception):
    """The model could not be reached or did not return a valid object."""


class RecipeGenerator(Protocol):
    async def generate(self, prompt: str, schema: Type[M]) -> M: ...


class OllamaRecipeGenerator:
    def __init__(
        self,
        ollama_client: Any,
        temperature: float = config.OLLAMA_TEMPERATURE,
        timeout_s: int = config.OLLAMA_TIMEOUT_S,
    ):
        self.ollama_client = ollama_client
        self.temperature = temperature
        self.timeout_s = timeout_s

    async def generate(self, prompt: str, schema: Type[M]) -> M:
        # Single attempt; callers decide what a failure means
        try:
            out = await self.ollama_client.chat(
                [{"role": "system", "content": SYSTEM_RECIPE}, {"role": "user", "content": prompt}],
                temperature=self.temperature,
                timeout_s=self.timeout_s,
                format=schema.model_json_schema(by_alias=True),
            )
        except Exception as e:
            raise GenerationError(f"LLM request failed: {e}") from e

        try:
            payload = json.loads(extract_json(out))
            return schema.model_validate(payload)
        except Exception as e:
            log.debug("unusable model output", extra={"output": _preview(out)})
            raise GenerationError(f"LLM output invalid: {e}") from e


def _preview(text: Optional[str], limit: int = 500) -> str:
    text = text or ""
    return text if len(text) <= limit else text[:limit] + "..."
