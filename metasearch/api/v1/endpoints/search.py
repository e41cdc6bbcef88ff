"""Search API: federated search across entity kinds."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from metasearch.api.v1.dependencies import (
    get_query_context,
    get_search_across_entities_resolver,
)
from metasearch.application.use_cases import SearchAcrossEntitiesResolver
from metasearch.core.limiter import limit_search
from metasearch.schemas.search import SearchAcrossEntitiesRequest, SearchResultsResponse
from metasearch.shared.context import QueryContext

router = APIRouter()


@router.post("/across-entities", response_model=SearchResultsResponse)
@limit_search
async def search_across_entities(
    request: Request,
    body: SearchAcrossEntitiesRequest,
    context: Annotated[QueryContext, Depends(get_query_context)],
    resolver: Annotated[
        SearchAcrossEntitiesResolver, Depends(get_search_across_entities_resolver)
    ],
) -> SearchResultsResponse:
    """Search across entity kinds (defaults to all searchable kinds)."""
    results = await resolver.get(body.to_dto(), context)
    return SearchResultsResponse.model_validate(results)
