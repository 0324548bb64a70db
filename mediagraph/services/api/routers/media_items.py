# mediagraph/services/api/routers/media_items.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from mediagraph.common.logging import get_logger
from mediagraph.common.settings import get_settings
from mediagraph.services.api.deps import get_catalog
from mediagraph.services.catalog.media_catalog import MediaCatalog
from mediagraph.services.mappers.media_item import (
    to_domain_from_create, to_domain_from_update, to_read_schema,
)
from mediagraph.services.schemas.media import (
    MediaItemCreate, MediaItemRead, MediaItemUpdate,
)

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(prefix=f"{cfg.api.prefix}/media-items", tags=["media-items"])


@router.post("", response_model=MediaItemRead, status_code=HTTPStatus.CREATED)
def create_media_item(payload: MediaItemCreate, catalog: MediaCatalog = Depends(get_catalog)) -> MediaItemRead:
    logger.info("Create media item request: %r", payload.title)
    created = catalog.create(to_domain_from_create(payload))
    return to_read_schema(created)


@router.put("", response_model=MediaItemRead)
def update_media_item(payload: MediaItemUpdate, catalog: MediaCatalog = Depends(get_catalog)) -> MediaItemRead:
    logger.info("Update media item request: %s", payload.id)
    updated = catalog.update(to_domain_from_update(payload))
    return to_read_schema(updated)


@router.get("", response_model=List[MediaItemRead])
def list_media_items(catalog: MediaCatalog = Depends(get_catalog)) -> List[MediaItemRead]:
    return [to_read_schema(it) for it in catalog.list()]


# declared before /{item_id} so "popular" is not parsed as an id
@router.get("/popular", response_model=List[MediaItemRead])
def popular_media_items(
    count: Optional[int] = Query(None, description="How many items; missing or <= 0 uses the default"),
    catalog: MediaCatalog = Depends(get_catalog),
) -> List[MediaItemRead]:
    logger.info("Popular media items request: count=%s", count)
    return [to_read_schema(it) for it in catalog.popular(count)]


@router.get("/{item_id}", response_model=MediaItemRead)
def get_media_item(item_id: int = Path(...), catalog: MediaCatalog = Depends(get_catalog)) -> MediaItemRead:
    return to_read_schema(catalog.get(item_id))


@router.delete("/{item_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_media_item(item_id: int, catalog: MediaCatalog = Depends(get_catalog)) -> None:
    catalog.remove(item_id)


# ---- Likes ----

@router.put("/{item_id}/like/{person_id}", status_code=HTTPStatus.NO_CONTENT)
def like_media_item(item_id: int, person_id: int, catalog: MediaCatalog = Depends(get_catalog)) -> None:
    logger.info("Like request: person %s -> media item %s", person_id, item_id)
    catalog.like(item_id, person_id)


@router.delete("/{item_id}/like/{person_id}", status_code=HTTPStatus.NO_CONTENT)
def unlike_media_item(item_id: int, person_id: int, catalog: MediaCatalog = Depends(get_catalog)) -> None:
    logger.info("Unlike request: person %s -> media item %s", person_id, item_id)
    catalog.unlike(item_id, person_id)
