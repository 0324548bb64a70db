# mediagraph/services/schemas/people.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


# ---------- Person ----------

class PersonBase(BaseModel):
    email: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[date] = None


class PersonCreate(PersonBase):
    pass


class PersonUpdate(PersonBase):
    id: Optional[int] = None


class PersonRead(PersonBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    friends: List[int] = []
