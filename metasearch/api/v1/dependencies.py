"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the request context and the resolvers.
Resolvers are built from app.state (populated by the lifespan) and
settings; routes depend only on these providers. Tests override
get_entity_client and get_search_executor.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from metasearch.application.interfaces.entity_client import IEntityClient
from metasearch.application.use_cases import MLModelGroupType, SearchAcrossEntitiesResolver
from metasearch.core.config import Settings, get_settings
from metasearch.domain.exceptions import AuthenticationException
from metasearch.infrastructure.security.jwt import actor_from_payload, verify_token
from metasearch.shared.context import QueryContext

_bearer = HTTPBearer(auto_error=False)


def get_entity_client(request: Request) -> IEntityClient:
    """Shared entity service client created at startup."""
    return request.app.state.entity_client


def get_search_executor(request: Request) -> Executor:
    """Bounded worker pool for cross-entity search."""
    return request.app.state.search_executor


def get_query_context(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> QueryContext:
    """Authenticate the bearer token and build the per-request context.

    Raises:
        AuthenticationException: If the token is missing or invalid.
    """
    if credentials is None:
        raise AuthenticationException("Missing bearer token")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException(str(e)) from e
    return QueryContext(
        actor=actor_from_payload(payload),
        request_id=getattr(request.state, "request_id", None),
    )


def get_search_across_entities_resolver(
    entity_client: Annotated[IEntityClient, Depends(get_entity_client)],
    executor: Annotated[Executor, Depends(get_search_executor)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchAcrossEntitiesResolver:
    """Cross-entity search resolver configured from settings."""
    return SearchAcrossEntitiesResolver(
        entity_client,
        executor,
        searchable_entity_types=settings.searchable_entity_types,
        default_start=settings.search_default_start,
        default_count=settings.search_default_count,
    )


def get_ml_model_group_type(
    entity_client: Annotated[IEntityClient, Depends(get_entity_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MLModelGroupType:
    """ML model group entity type."""
    return MLModelGroupType(
        entity_client,
        browse_path_delimiter=settings.browse_path_delimiter,
        default_start=settings.search_default_start,
        default_count=settings.search_default_count,
    )
