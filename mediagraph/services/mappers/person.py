# mediagraph/services/mappers/person.py
from __future__ import annotations

from mediagraph.domain.entities.person import Person
from mediagraph.services.schemas.people import PersonCreate, PersonUpdate, PersonRead


def to_domain_from_create(s: PersonCreate) -> Person:
    return Person(email=s.email, login=s.login, name=s.name, birthday=s.birthday)


def to_domain_from_update(s: PersonUpdate) -> Person:
    p = to_domain_from_create(s)
    p.id = s.id
    return p


def to_read_schema(p: Person) -> PersonRead:
    return PersonRead(
        id=p.id,
        email=p.email,
        login=p.login,
        name=p.name,
        birthday=p.birthday,
        friends=sorted(p.friends),
    )
