from __future__ import annotations
from enum import StrEnum


class EntityKind(StrEnum):
    media_item = "media item"
    person = "person"
