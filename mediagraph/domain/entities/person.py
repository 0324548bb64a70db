# mediagraph/domain/entities/person.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional, Set


@dataclass
class Person:
    """
    A member of the social graph.

    `login` is the handle; `name` is the display name and is filled from
    `login` by the graph when left blank. `friends` is symmetric across the
    graph and is only changed through SocialGraph.befriend/unfriend/remove.
    """

    id: Optional[int] = None
    email: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[date] = None
    friends: Set[int] = field(default_factory=set)

    def copy(self) -> "Person":
        return replace(self, friends=set(self.friends))
