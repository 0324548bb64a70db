# mediagraph/services/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from mediagraph.services.api.deps import get_container
from mediagraph.services.container import ServiceContainer

router = APIRouter()


@router.get("/healthz")
def healthz(container: ServiceContainer = Depends(get_container)):
    s = container.settings
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "media_items": container.catalog.count(),
        "people": container.graph.count(),
    }
