from mediagraph.services.schemas.media import (
    MediaItemRead,
    MediaItemCreate,
    MediaItemUpdate,
)
from mediagraph.services.schemas.people import (
    PersonRead,
    PersonCreate,
    PersonUpdate,
)

__all__ = [
    "MediaItemRead",
    "MediaItemCreate",
    "MediaItemUpdate",
    "PersonRead",
    "PersonCreate",
    "PersonUpdate",
]
