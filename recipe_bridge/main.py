from fastapi import FastAPI
from recipe_bridge.routers import health, recipes_generate
from recipe_bridge.core.config import APP_VERSION
from recipe_bridge.core.logging import setup_logging
from recipe_bridge.core.middleware import RequestLoggingMiddleware


def create_app() -> FastAPI:
    app = FastAPI(title="Recipe Bridge", version=APP_VERSION)
    app.include_router(recipes_generate.router)
    app.include_router(health.router)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)

    return app

app = create_app()
