# mediagraph/services/catalog/media_catalog.py
from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from mediagraph.common.logging import get_logger
from mediagraph.common.settings import CatalogConfig
from mediagraph.domain.entities.media_item import MediaItem
from mediagraph.domain.enums import EntityKind
from mediagraph.domain.errors import NotFoundError
from mediagraph.domain.policies.media_rules import validate_media_item
from mediagraph.domain.stores.identity_store import IdentityStore
from mediagraph.services.guards.person_guard import PersonGuard

logger = get_logger(__name__)


class MediaCatalog:
    """
    Owns media items, their like sets and the popularity ranking.

    Every public method runs under the store's lock. Build the catalog on a
    store whose lock is shared with the people store (see
    services.container) so a like can't be recorded against someone who is
    removed between the existence check and the write.
    """

    def __init__(
        self,
        store: IdentityStore[MediaItem],
        guard: PersonGuard,
        config: Optional[CatalogConfig] = None,
    ) -> None:
        self._store = store
        self._guard = guard
        self._cfg = config or CatalogConfig()
        self._lock = store.lock

    # ---- lifecycle ----

    def create(self, draft: MediaItem) -> MediaItem:
        self._validate(draft)
        with self._lock:
            item = replace(draft, id=None, likes=set())
            item.id = self._store.insert(item)
            logger.info("Media item %s created: %r", item.id, item.title)
            return item.copy()

    def update(self, item: MediaItem) -> MediaItem:
        """Replace every caller-owned field; the stored like set is kept."""
        self._validate(item)
        with self._lock:
            if not self._store.exists(item.id):
                logger.warning("Update of unknown media item %s", item.id)
                raise NotFoundError(EntityKind.media_item, item.id)
            previous = self._store.get(item.id)
            updated = replace(item, likes=previous.likes)
            self._store.replace(item.id, updated)
            logger.info("Media item %s updated", item.id)
            return updated.copy()

    def remove(self, item_id: int) -> MediaItem:
        with self._lock:
            removed = self._store.remove(item_id)
            logger.info("Media item %s removed", item_id)
            return removed.copy()

    # ---- reads ----

    def get(self, item_id: int) -> MediaItem:
        with self._lock:
            return self._store.get(item_id).copy()

    def list(self) -> List[MediaItem]:
        with self._lock:
            return [it.copy() for it in self._store.list()]

    def count(self) -> int:
        return len(self._store)

    # ---- likes ----

    def like(self, item_id: int, person_id: int) -> None:
        with self._lock:
            item = self._store.get(item_id)
            self._guard.require(person_id)
            if person_id in item.likes:
                logger.debug("Person %s already likes media item %s", person_id, item_id)
                return
            item.likes.add(person_id)
            logger.info("Person %s likes media item %s", person_id, item_id)

    def unlike(self, item_id: int, person_id: int) -> None:
        with self._lock:
            item = self._store.get(item_id)
            self._guard.require(person_id)
            if person_id not in item.likes:
                logger.debug("Person %s does not like media item %s", person_id, item_id)
                return
            item.likes.discard(person_id)
            logger.info("Person %s no longer likes media item %s", person_id, item_id)

    # ---- ranking ----

    def popular(self, limit: Optional[int] = None) -> List[MediaItem]:
        """
        Most-liked items first; equal like counts are ordered by ascending id.
        A missing or non-positive limit falls back to the configured default.
        """
        if limit is None or limit <= 0:
            limit = self._cfg.popular_default_limit
        with self._lock:
            ranked = sorted(self._store.list(), key=lambda it: (-len(it.likes), it.id))
            return [it.copy() for it in ranked[:limit]]

    # ---- helpers ----

    def _validate(self, item: MediaItem) -> None:
        validate_media_item(
            item,
            synopsis_max_length=self._cfg.synopsis_max_length,
            earliest_release_date=self._cfg.earliest_release_date,
        )
