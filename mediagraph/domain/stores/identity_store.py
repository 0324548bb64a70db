# mediagraph/domain/stores/identity_store.py
from __future__ import annotations

import threading
from typing import Dict, Generic, List, Optional, TypeVar

from mediagraph.domain.enums import EntityKind
from mediagraph.domain.errors import NotFoundError

T = TypeVar("T")


class IdentityStore(Generic[T]):
    """
    In-memory keyed container that hands out integer identities.

    Notes
    -----
    - Identities start at 1 and only ever grow; a removed id is never handed out again.
    - The counter belongs to this instance (no module-level state).
    - `lock` is a re-entrant lock. Services that must touch several values
      atomically (both sides of a friendship, an item plus a person check)
      pass the same lock to every store they use and hold it around the
      whole operation. The store's own methods take it too, which is why it
      must be re-entrant.
    - Values are stored by reference; callers that hand values out of the
      service layer are responsible for copying them.
    """

    def __init__(self, kind: EntityKind, *, lock: Optional[threading.RLock] = None) -> None:
        self._kind = kind
        self._items: Dict[int, T] = {}
        self._next_id = 1
        self._lock = lock if lock is not None else threading.RLock()

    @property
    def kind(self) -> EntityKind:
        return self._kind

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # -------------------------
    # Mutations
    # -------------------------
    def insert(self, value: T) -> int:
        with self._lock:
            identity = self._next_id
            self._next_id += 1
            self._items[identity] = value
            return identity

    def replace(self, identity: int, value: T) -> None:
        with self._lock:
            if identity not in self._items:
                raise NotFoundError(self._kind, identity)
            self._items[identity] = value

    def remove(self, identity: int) -> T:
        with self._lock:
            try:
                return self._items.pop(identity)
            except KeyError:
                raise NotFoundError(self._kind, identity) from None

    # -------------------------
    # Reads
    # -------------------------
    def get(self, identity: int) -> T:
        with self._lock:
            try:
                return self._items[identity]
            except KeyError:
                raise NotFoundError(self._kind, identity) from None

    def exists(self, identity: Optional[int]) -> bool:
        if identity is None:
            return False
        with self._lock:
            return identity in self._items

    def list(self) -> List[T]:
        """All current values, in ascending identity order."""
        with self._lock:
            return [self._items[k] for k in sorted(self._items)]

    def __contains__(self, identity: object) -> bool:
        with self._lock:
            return identity in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

