# mediagraph/services/mappers/media_item.py
from __future__ import annotations

from mediagraph.domain.entities.media_item import MediaItem
from mediagraph.services.schemas.media import (
    MediaItemCreate, MediaItemUpdate, MediaItemRead,
)


def to_domain_from_create(s: MediaItemCreate) -> MediaItem:
    return MediaItem(
        title=s.title,
        synopsis=s.synopsis,
        release_date=s.release_date,
        runtime=s.runtime,
    )


def to_domain_from_update(s: MediaItemUpdate) -> MediaItem:
    item = to_domain_from_create(s)
    item.id = s.id
    return item


def to_read_schema(item: MediaItem) -> MediaItemRead:
    return MediaItemRead(
        id=item.id,
        title=item.title,
        synopsis=item.synopsis,
        release_date=item.release_date,
        runtime=item.runtime,
        likes=sorted(item.likes),
    )
