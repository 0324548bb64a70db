# mediagraph/services/api/app.py
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediagraph.common.logging import get_logger
from mediagraph.common.settings import get_settings
from mediagraph.services.api.error_handlers import register_error_handlers
from mediagraph.services.api.routers import health, media_items, people
from mediagraph.services.container import ServiceContainer, build_container

cfg = get_settings()


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the HTTP app around a service container. Each call without an
    explicit container gets fresh, empty stores.
    """
    container = container or build_container(settings=cfg)
    settings = container.settings
    get_logger("mediagraph", settings.log_level)

    app = FastAPI(
        title="MediaGraph API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )
    app.state.container = container

    allow_origins = ["*"] if settings.is_development else settings.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=settings.api.cors_allow_methods,
        allow_headers=settings.api.cors_allow_headers,
        allow_credentials=settings.api.cors_allow_credentials,
    )

    register_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(media_items.router)
    app.include_router(people.router)
    return app


app = create_app()
