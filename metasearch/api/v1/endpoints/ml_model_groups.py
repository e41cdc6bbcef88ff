"""ML model group API: batch load, search, autocomplete, browse, browse paths.

Handlers are sync (run in FastAPI's threadpool) because the entity type's
operations block on the entity service.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from metasearch.api.v1.dependencies import get_ml_model_group_type, get_query_context
from metasearch.application.use_cases import MLModelGroupType
from metasearch.core.limiter import limit_search
from metasearch.schemas.ml_model_group import (
    BatchLoadRequest,
    BatchLoadResponse,
    BrowsePathsResponse,
    EntityLoadResultResponse,
    MLModelGroupAutoCompleteRequest,
    MLModelGroupBrowseRequest,
    MLModelGroupSearchRequest,
)
from metasearch.schemas.search import (
    AutoCompleteResultsResponse,
    BrowsePathResponse,
    BrowseResultsResponse,
    SearchResultsResponse,
    filters_to_dto,
)
from metasearch.shared.context import QueryContext

router = APIRouter()

ContextDep = Annotated[QueryContext, Depends(get_query_context)]
EntityTypeDep = Annotated[MLModelGroupType, Depends(get_ml_model_group_type)]


@router.post("/batch-load", response_model=BatchLoadResponse)
def batch_load(
    body: BatchLoadRequest,
    context: ContextDep,
    entity_type: EntityTypeDep,
) -> BatchLoadResponse:
    """Load groups by URN; results[i] is null when urns[i] was not found."""
    loaded = entity_type.batch_load(body.urns, context)
    return BatchLoadResponse(
        results=[
            EntityLoadResultResponse.model_validate(item) if item is not None else None
            for item in loaded
        ]
    )


@router.post("/search", response_model=SearchResultsResponse)
@limit_search
def search(
    request: Request,
    body: MLModelGroupSearchRequest,
    context: ContextDep,
    entity_type: EntityTypeDep,
) -> SearchResultsResponse:
    results = entity_type.search(
        body.query, filters_to_dto(body.filters), body.start, body.count, context
    )
    return SearchResultsResponse.model_validate(results)


@router.post("/autocomplete", response_model=AutoCompleteResultsResponse)
@limit_search
def auto_complete(
    request: Request,
    body: MLModelGroupAutoCompleteRequest,
    context: ContextDep,
    entity_type: EntityTypeDep,
) -> AutoCompleteResultsResponse:
    results = entity_type.auto_complete(
        body.query, body.field, filters_to_dto(body.filters), body.limit, context
    )
    return AutoCompleteResultsResponse.model_validate(results)


@router.post("/browse", response_model=BrowseResultsResponse)
def browse(
    body: MLModelGroupBrowseRequest,
    context: ContextDep,
    entity_type: EntityTypeDep,
) -> BrowseResultsResponse:
    """List groups and child nodes under body.path."""
    results = entity_type.browse(
        body.path, filters_to_dto(body.filters), body.start, body.count, context
    )
    return BrowseResultsResponse.model_validate(results)


@router.get("/browse-paths", response_model=BrowsePathsResponse)
def browse_paths(
    context: ContextDep,
    entity_type: EntityTypeDep,
    urn: str = Query(..., min_length=1),
) -> BrowsePathsResponse:
    """Browse locations of one group."""
    paths = entity_type.browse_paths(urn, context)
    return BrowsePathsResponse(
        paths=[BrowsePathResponse.model_validate(p) for p in paths]
    )
