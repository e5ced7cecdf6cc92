# recipe_bridge/clients/ollama.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from recipe_bridge.core import config


class OllamaClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:11434",
        model: str = "qwen2.5:14b",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self._transport = transport

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.2,
        timeout_s: int = 180,
        format: Optional[Dict[str, Any]] = None,
    ) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "stream": False,
            "options": {"temperature": temperature},
        }
        # Structured outputs: Ollama constrains decoding to this JSON schema
        if format is not None:
            payload["format"] = format

        async with httpx.AsyncClient(timeout=timeout_s, transport=self._transport) as client:
            r = await client.post(f"{self.base_url}/api/chat", json=payload)
            r.raise_for_status()
            data = r.json()

        # Ollama returns: {"message": {"role": "...", "content": "..."}, ...}
        return (data.get("message") or {}).get("content") or ""

    async def ping(self, timeout_s: float = 2.0) -> None:
        # /api/tags is a cheap health-ish endpoint for Ollama
        async with httpx.AsyncClient(timeout=timeout_s, transport=self._transport) as client:
            r = await client.get(f"{self.base_url}/api/tags")
            r.raise_for_status()


ollama = OllamaClient(
    base_url=config.OLLAMA_BASE_URL,
    model=config.OLLAMA_MODEL,
)
