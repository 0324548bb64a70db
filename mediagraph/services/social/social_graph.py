# mediagraph/services/social/social_graph.py
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from mediagraph.common.logging import get_logger
from mediagraph.domain.entities.person import Person
from mediagraph.domain.enums import EntityKind
from mediagraph.domain.errors import IntegrityViolation, InvalidError, NotFoundError
from mediagraph.domain.policies.person_rules import apply_display_name_default, validate_person
from mediagraph.domain.ports.clock import ClockPort
from mediagraph.domain.stores.identity_store import IdentityStore

logger = get_logger(__name__)


class SocialGraph:
    """
    Owns people and the friendship relation between them.

    Friendship is symmetric: b in a.friends <=> a in b.friends. Both sides
    are written while holding the store lock, so no reader ever sees one
    side without the other.
    """

    def __init__(self, store: IdentityStore[Person], clock: ClockPort) -> None:
        self._store = store
        self._clock = clock
        self._lock = store.lock

    # ---- lifecycle ----

    def create(self, draft: Person) -> Person:
        logger.debug("Creating person with login %r", draft.login)
        validate_person(draft, today=self._clock.today())
        person = apply_display_name_default(replace(draft, id=None, friends=set()))
        with self._lock:
            person.id = self._store.insert(person)
            logger.info("Person %s created (login=%r)", person.id, person.login)
            return person.copy()

    def update(self, person: Person) -> Person:
        """Replace every caller-owned field; the stored friend set is kept."""
        logger.debug("Updating person %s", person.id)
        validate_person(person, today=self._clock.today())
        with self._lock:
            if not self._store.exists(person.id):
                logger.warning("Update of unknown person %s", person.id)
                raise NotFoundError(EntityKind.person, person.id)
            previous = self._store.get(person.id)
            updated = apply_display_name_default(replace(person, friends=previous.friends))
            self._store.replace(person.id, updated)
            logger.info("Person %s updated", person.id)
            return updated.copy()

    def remove(self, person_id: int) -> Person:
        """Drop a person and strip them from every former friend in the same step."""
        with self._lock:
            person = self._store.get(person_id)
            # resolve all first so a dangling id leaves the graph untouched
            friends = [self._resolve(fid, owner=person_id) for fid in sorted(person.friends)]
            for friend in friends:
                friend.friends.discard(person_id)
            self._store.remove(person_id)
            logger.info("Person %s removed (%d friendships dropped)", person_id, len(person.friends))
            return person.copy()

    # ---- reads ----

    def get(self, person_id: int) -> Person:
        with self._lock:
            return self._store.get(person_id).copy()

    def exists(self, person_id: int) -> bool:
        return self._store.exists(person_id)

    def list(self) -> List[Person]:
        with self._lock:
            return [p.copy() for p in self._store.list()]

    def count(self) -> int:
        return len(self._store)

    # ---- friendship ----

    def befriend(self, a_id: int, b_id: int) -> None:
        with self._lock:
            a = self._store.get(a_id)
            b = self._store.get(b_id)
            if a_id == b_id:
                logger.warning("Person %s tried to befriend themself", a_id)
                raise InvalidError("A person cannot befriend themself", field="friend_id")
            a.friends.add(b_id)
            b.friends.add(a_id)
            logger.info("People %s and %s are now friends", a_id, b_id)

    def unfriend(self, a_id: int, b_id: int) -> None:
        with self._lock:
            a = self._store.get(a_id)
            b = self._store.get(b_id)
            a.friends.discard(b_id)
            b.friends.discard(a_id)
            logger.info("People %s and %s are no longer friends", a_id, b_id)

    def friends_of(self, person_id: int) -> List[Person]:
        with self._lock:
            person = self._store.get(person_id)
            return self._resolve_all(person.friends, owner=person_id)

    def common_friends(self, a_id: int, b_id: int) -> List[Person]:
        with self._lock:
            a = self._store.get(a_id)
            b = self._store.get(b_id)
            return self._resolve_all(a.friends & b.friends, owner=a_id)

    # ---- helpers ----

    def _resolve(self, friend_id: int, *, owner: int) -> Person:
        try:
            return self._store.get(friend_id)
        except NotFoundError as e:
            logger.critical("Person %s lists unknown friend %s", owner, friend_id)
            raise IntegrityViolation(
                f"person {owner} lists friend {friend_id} which is not in the store"
            ) from e

    def _resolve_all(self, ids: Iterable[int], *, owner: int) -> List[Person]:
        return [self._resolve(fid, owner=owner).copy() for fid in sorted(ids)]
