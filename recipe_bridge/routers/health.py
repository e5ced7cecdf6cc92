# recipe_bridge/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Response, status

from recipe_bridge.clients.ollama import ollama
from recipe_bridge.services.health import check_ollama, version_payload

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: if the process is serving requests, it's up
    return {"status": "ok", **version_payload()}


@router.get("/health/ready")
async def ready(response: Response):
    llm = await check_ollama(ollama)

    # Without the model there is nothing to serve
    if llm["status"] != "ok":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        overall = "fail"
    else:
        overall = "ok"

    return {
        "status": overall,
        "checks": {"ollama": llm},
        **version_payload(),
    }


@router.get("/version")
def version():
    return version_payload()
