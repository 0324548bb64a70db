# tests/conftest.py
from __future__ import annotations

from datetime import date

import pytest

from mediagraph.common.settings import Settings
from mediagraph.domain.entities.media_item import MediaItem
from mediagraph.domain.entities.person import Person
from mediagraph.services.clock.system_clock import FixedClock
from mediagraph.services.container import ServiceContainer, build_container

TODAY = date(2024, 6, 1)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def clock(today) -> FixedClock:
    return FixedClock(today)


@pytest.fixture()
def container(clock) -> ServiceContainer:
    """Fresh, empty stores per test."""
    return build_container(settings=Settings(_env_file=None), clock=clock)


@pytest.fixture()
def catalog(container):
    return container.catalog


@pytest.fixture()
def graph(container):
    return container.graph


@pytest.fixture()
def make_item():
    """Build a valid media item draft; keyword overrides replace single fields."""
    def _make(**overrides) -> MediaItem:
        fields = dict(
            title="Nisi Eiusmod",
            synopsis="Duis in consequat esse",
            release_date=date(1967, 3, 25),
            runtime=100,
        )
        fields.update(overrides)
        return MediaItem(**fields)
    return _make


@pytest.fixture()
def make_person():
    """Build a valid person draft keyed by login."""
    def _make(login: str = "dolore", **overrides) -> Person:
        fields = dict(
            email=f"{login}@example.com",
            login=login,
            name="Nick Name",
            birthday=date(1946, 8, 20),
        )
        fields.update(overrides)
        return Person(**fields)
    return _make
