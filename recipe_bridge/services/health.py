# recipe_bridge/services/health.py
from __future__ import annotations

import time
from typing import Any, Dict, Optional

from recipe_bridge.clients.ollama import OllamaClient
from recipe_bridge.core import config


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check_result(status: str, latency_ms: int, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status, "latency_ms": latency_ms}
    if error:
        out["error"] = error
    return out


async def check_ollama(client: OllamaClient) -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        await client.ping()
        return _check_result("ok", _ms_since(start))
    except Exception as e:
        return _check_result("fail", _ms_since(start), str(e))


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
    }
