from mediagraph.domain.enums.entity_kind import EntityKind

__all__ = [
    "EntityKind",
]
