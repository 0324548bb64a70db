# mediagraph/services/api/routers/people.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path

from mediagraph.common.logging import get_logger
from mediagraph.common.settings import get_settings
from mediagraph.services.api.deps import get_graph
from mediagraph.services.mappers.person import (
    to_domain_from_create, to_domain_from_update, to_read_schema,
)
from mediagraph.services.schemas.people import PersonCreate, PersonRead, PersonUpdate
from mediagraph.services.social.social_graph import SocialGraph

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(prefix=f"{cfg.api.prefix}/people", tags=["people"])


# ---- CRUD ----

@router.post("", response_model=PersonRead, status_code=HTTPStatus.CREATED)
def create_person(payload: PersonCreate, graph: SocialGraph = Depends(get_graph)) -> PersonRead:
    logger.info("Create person request: login=%r name=%r", payload.login, payload.name)
    return to_read_schema(graph.create(to_domain_from_create(payload)))


@router.put("", response_model=PersonRead)
def update_person(payload: PersonUpdate, graph: SocialGraph = Depends(get_graph)) -> PersonRead:
    logger.info("Update person request: %s", payload.id)
    return to_read_schema(graph.update(to_domain_from_update(payload)))


@router.get("", response_model=List[PersonRead])
def list_people(graph: SocialGraph = Depends(get_graph)) -> List[PersonRead]:
    return [to_read_schema(p) for p in graph.list()]


@router.get("/{person_id}", response_model=PersonRead)
def get_person(person_id: int = Path(...), graph: SocialGraph = Depends(get_graph)) -> PersonRead:
    return to_read_schema(graph.get(person_id))


@router.delete("/{person_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_person(person_id: int, graph: SocialGraph = Depends(get_graph)) -> None:
    graph.remove(person_id)


# ---- Friends ----

@router.put("/{person_id}/friends/{friend_id}", status_code=HTTPStatus.NO_CONTENT)
def add_friend(person_id: int, friend_id: int, graph: SocialGraph = Depends(get_graph)) -> None:
    logger.info("Befriend request: %s <-> %s", person_id, friend_id)
    graph.befriend(person_id, friend_id)


@router.delete("/{person_id}/friends/{friend_id}", status_code=HTTPStatus.NO_CONTENT)
def remove_friend(person_id: int, friend_id: int, graph: SocialGraph = Depends(get_graph)) -> None:
    logger.info("Unfriend request: %s <-> %s", person_id, friend_id)
    graph.unfriend(person_id, friend_id)


@router.get("/{person_id}/friends", response_model=List[PersonRead])
def list_friends(person_id: int, graph: SocialGraph = Depends(get_graph)) -> List[PersonRead]:
    return [to_read_schema(p) for p in graph.friends_of(person_id)]


@router.get("/{person_id}/friends/common/{other_id}", response_model=List[PersonRead])
def list_common_friends(person_id: int, other_id: int, graph: SocialGraph = Depends(get_graph)) -> List[PersonRead]:
    return [to_read_schema(p) for p in graph.common_friends(person_id, other_id)]
