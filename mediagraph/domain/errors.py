# mediagraph/domain/errors.py
from __future__ import annotations

from typing import Optional

from mediagraph.domain.enums import EntityKind


class DomainError(Exception):
    """Expected, caller-caused failure. Never retried; propagated as-is to the boundary."""


class InvalidError(DomainError, ValueError):
    """A field rule was violated. `field` names the first offending attribute."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError, LookupError):
    """A referenced identity does not exist in the store for `kind`."""

    def __init__(self, kind: EntityKind, identity: Optional[int]) -> None:
        super().__init__(f"{kind.value.capitalize()} with id {identity} not found")
        self.kind = kind
        self.identity = identity


class IntegrityViolation(AssertionError):
    """
    An internal invariant is broken (e.g. a dangling friend id).
    This is a programming error, not user input, and must not be mapped to 404.
    """
