# mediagraph/services/guards/person_guard.py
from __future__ import annotations

from mediagraph.common.logging import get_logger
from mediagraph.domain.enums import EntityKind
from mediagraph.domain.errors import NotFoundError
from mediagraph.domain.ports.people import PersonDirectoryPort

logger = get_logger(__name__)


class PersonGuard:
    """
    Checks that a person id refers to someone the directory knows about
    before another service records something against it.

    The guard holds no lock of its own: callers must already hold the lock
    shared with the directory so the check and the mutation that follows it
    are one step.
    """

    def __init__(self, directory: PersonDirectoryPort) -> None:
        self._directory = directory

    def require(self, person_id: int) -> None:
        if not self._directory.exists(person_id):
            logger.warning("Person %s not found", person_id)
            raise NotFoundError(EntityKind.person, person_id)
