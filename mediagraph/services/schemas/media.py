# mediagraph/services/schemas/media.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------- Shared base ----------
# Shape only. Field rules (blank title, synopsis length, release cutoff,
# positive runtime) are enforced by the catalog so every caller gets them.
class MediaItemBase(BaseModel):
    title: Optional[str] = None
    synopsis: Optional[str] = None
    release_date: Optional[date] = None
    runtime: Optional[int] = Field(None, description="Runtime in minutes")


# ---------- Create / Update / Read ----------
class MediaItemCreate(MediaItemBase):
    pass


class MediaItemUpdate(MediaItemBase):
    # full replacement, so the id travels in the body; a missing id is a 404 from the catalog
    id: Optional[int] = None


class MediaItemRead(MediaItemBase):
    id: int
    likes: List[int] = []

    model_config = ConfigDict(from_attributes=True)
