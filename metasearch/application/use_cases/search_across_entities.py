"""Cross-entity search resolver.

Validates and defaults the input on the calling task, then runs the
blocking entity service call on a bounded worker pool and returns an
awaitable, cancellable future.
"""

from __future__ import annotations

import asyncio
import contextvars
import functools
import logging
from collections.abc import Sequence
from concurrent.futures import Executor
from typing import TYPE_CHECKING, Any

from metasearch.application.dtos.entity_service import Filter
from metasearch.application.dtos.search import SearchAcrossEntitiesInput, SearchResults
from metasearch.application.mappers.search_results import map_urn_search_results
from metasearch.application.services.resolver_utils import build_filter
from metasearch.core.constants import DEFAULT_COUNT, DEFAULT_START, SEARCHABLE_ENTITY_TYPES
from metasearch.domain.enums import EntityType
from metasearch.domain.exceptions import ResolverException, ValidationException
from metasearch.shared.telemetry.tracing import add_span_attributes, traced
from metasearch.shared.utils.sanitization import escape_forward_slash, is_blank

if TYPE_CHECKING:
    from metasearch.application.interfaces.entity_client import IEntityClient
    from metasearch.shared.context import QueryContext

logger = logging.getLogger(__name__)


class SearchAcrossEntitiesResolver:
    """Free-text search across several entity kinds.

    The allow-list of searchable kinds and the pagination defaults are
    injected so deployments and tests can override them.
    """

    def __init__(
        self,
        entity_client: IEntityClient,
        executor: Executor,
        searchable_entity_types: Sequence[EntityType] = SEARCHABLE_ENTITY_TYPES,
        default_start: int = DEFAULT_START,
        default_count: int = DEFAULT_COUNT,
    ) -> None:
        self.entity_client = entity_client
        self.executor = executor
        self.searchable_entity_types = tuple(searchable_entity_types)
        self.default_start = default_start
        self.default_count = default_count

    def get(
        self, input: SearchAcrossEntitiesInput, context: QueryContext
    ) -> asyncio.Future[SearchResults]:
        """Validate input and submit the search; return a future for its result.

        Must be called from a running event loop. Validation errors are
        raised immediately, before anything is submitted. Cancelling the
        returned future before a worker picks the task up prevents the
        downstream call.

        Raises:
            ValidationException: If the query is None, empty, or whitespace-only.
        """
        if is_blank(input.query):
            raise ValidationException(
                "'query' parameter cannot be null or empty", field="query"
            )

        entity_types = self.resolve_entity_types(input.types)
        entity_names = [t.entity_name for t in entity_types]
        sanitized_query = escape_forward_slash(input.query)
        start = input.start if input.start is not None else self.default_start
        count = input.count if input.count is not None else self.default_count
        search_filter = build_filter(input.filters)

        request_details = {
            "entity_types": [t.value for t in entity_types],
            "query": input.query,
            "filters": [{"field": f.field, "value": f.value} for f in input.filters or []],
            "start": start,
            "count": count,
        }

        # Worker threads do not inherit contextvars (request ID, active span).
        ctx = contextvars.copy_context()
        loop = asyncio.get_running_loop()
        return loop.run_in_executor(
            self.executor,
            functools.partial(
                ctx.run,
                self._search,
                entity_names=entity_names,
                query=sanitized_query,
                search_filter=search_filter,
                start=start,
                count=count,
                actor=context.actor,
                request_details=request_details,
            ),
        )

    def resolve_entity_types(self, types: list[EntityType] | None) -> tuple[EntityType, ...]:
        """Requested types, or the configured allow-list when none are given."""
        if not types:
            return self.searchable_entity_types
        return tuple(types)

    @traced("resolver.search_across_entities")
    def _search(
        self,
        entity_names: list[str],
        query: str,
        search_filter: Filter | None,
        start: int,
        count: int,
        actor: str,
        request_details: dict[str, Any],
    ) -> SearchResults:
        logger.debug(
            "Executing search for multiple entities: entity types %s, query %s, filters: %s, start: %s, count: %s",
            request_details["entity_types"],
            request_details["query"],
            request_details["filters"],
            start,
            count,
        )
        try:
            result = self.entity_client.search_across_entities(
                entity_names, query, search_filter, start, count, actor
            )
            results = map_urn_search_results(result)
        except Exception as e:
            summary = _format_request(request_details)
            logger.error(
                "Failed to execute search for multiple entities: %s", summary, exc_info=True
            )
            raise ResolverException(
                f"Failed to execute search: {summary}", details=request_details
            ) from e
        add_span_attributes(entity_type_count=len(entity_names), result_total=results.total)
        return results


def _format_request(details: dict[str, Any]) -> str:
    return (
        f"entity types {details['entity_types']}, query {details['query']}, "
        f"filters: {details['filters']}, start: {details['start']}, count: {details['count']}"
    )
