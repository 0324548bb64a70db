# mediagraph/services/container.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from mediagraph.common.settings import Settings, get_settings
from mediagraph.domain.entities.media_item import MediaItem
from mediagraph.domain.entities.person import Person
from mediagraph.domain.enums import EntityKind
from mediagraph.domain.ports.clock import ClockPort
from mediagraph.domain.stores.identity_store import IdentityStore
from mediagraph.services.catalog.media_catalog import MediaCatalog
from mediagraph.services.clock.system_clock import SystemClock
from mediagraph.services.guards.person_guard import PersonGuard
from mediagraph.services.social.social_graph import SocialGraph


@dataclass
class ServiceContainer:
    """Process-wide wiring: both stores share one lock, so cross-store operations are atomic."""
    catalog: MediaCatalog
    graph: SocialGraph
    settings: Settings


def build_container(
    *,
    settings: Optional[Settings] = None,
    clock: Optional[ClockPort] = None,
) -> ServiceContainer:
    cfg = settings or get_settings()
    lock = threading.RLock()

    people: IdentityStore[Person] = IdentityStore(EntityKind.person, lock=lock)
    media: IdentityStore[MediaItem] = IdentityStore(EntityKind.media_item, lock=lock)

    graph = SocialGraph(people, clock or SystemClock())
    catalog = MediaCatalog(media, PersonGuard(graph), cfg.catalog)
    return ServiceContainer(catalog=catalog, graph=graph, settings=cfg)
