from __future__ import annotations
from typing import Protocol

class PersonDirectoryPort(Protocol):
    """Anything that can answer whether a person id is currently known."""
    def exists(self, person_id: int) -> bool: ...
