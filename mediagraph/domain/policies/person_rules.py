# mediagraph/domain/policies/person_rules.py
from __future__ import annotations

from datetime import date

from mediagraph.common.logging import get_logger
from mediagraph.domain.entities.person import Person
from mediagraph.domain.errors import InvalidError

logger = get_logger(__name__)


def validate_person(person: Person, *, today: date) -> None:
    """
    Email must be non-blank and contain "@"; login must be non-blank with no
    whitespace; birthday, if set, must not be after `today`.
    """
    email = person.email
    if email is None or not email.strip() or "@" not in email:
        logger.warning("Person rejected: bad email %r", email)
        raise InvalidError("Email must not be blank and must contain '@'", field="email")

    login = person.login
    if login is None or not login.strip() or any(ch.isspace() for ch in login):
        logger.warning("Person rejected: bad login %r", login)
        raise InvalidError("Login must not be blank or contain whitespace", field="login")

    if person.birthday is not None and person.birthday > today:
        logger.warning("Person rejected: birthday %s is after %s", person.birthday, today)
        raise InvalidError("Birthday must not be in the future", field="birthday")


def apply_display_name_default(person: Person) -> Person:
    """Blank display name falls back to the login. Run after validate_person."""
    if person.name is None or not person.name.strip():
        person.name = person.login
    return person
