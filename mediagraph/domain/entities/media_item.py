# mediagraph/domain/entities/media_item.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional, Set


@dataclass
class MediaItem:
    """
    Core domain entity for a film or other piece of media.

    `id` is None on drafts and assigned once by the catalog's store.
    `likes` holds the ids of people who like this item; it is managed only
    through MediaCatalog.like/unlike and survives updates.

    Field rules (non-blank title, synopsis length, earliest release date,
    positive runtime) live in domain.policies.media_rules so the entity
    stays lean and drafts can be built before they are checked.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    synopsis: Optional[str] = None
    release_date: Optional[date] = None
    runtime: Optional[int] = None  # minutes
    likes: Set[int] = field(default_factory=set)

    def copy(self) -> "MediaItem":
        # detach the set so callers never alias stored state
        return replace(self, likes=set(self.likes))
