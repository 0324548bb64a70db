# mediagraph/services/api/deps.py
from __future__ import annotations

from fastapi import Depends, Request

from mediagraph.services.catalog.media_catalog import MediaCatalog
from mediagraph.services.container import ServiceContainer
from mediagraph.services.social.social_graph import SocialGraph


def get_container(request: Request) -> ServiceContainer:
    """The container create_app() attached to app.state. Tests swap it by passing their own."""
    return request.app.state.container


def get_catalog(container: ServiceContainer = Depends(get_container)) -> MediaCatalog:
    return container.catalog


def get_graph(container: ServiceContainer = Depends(get_container)) -> SocialGraph:
    return container.graph
