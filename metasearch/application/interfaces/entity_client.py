"""Entity service client interface (port) for the application layer.

Resolvers depend on this protocol only; the REST implementation lives in
metasearch.infrastructure.entity_client. All calls are blocking and carry the
actor (caller identity) used downstream for authorization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from metasearch.application.dtos.entity_service import (
        AutoCompleteResult,
        BrowseResult,
        EntitySnapshot,
        Filter,
        SearchResult,
    )


class IEntityClient(Protocol):
    """Protocol for the downstream entity/search service (DIP)."""

    def search_across_entities(
        self,
        entities: list[str],
        query: str,
        filter: Filter | None,
        start: int,
        count: int,
        actor: str,
    ) -> SearchResult:
        """Search over the named subset of entity kinds."""

    def search(
        self,
        entity: str,
        query: str,
        facet_filters: dict[str, str],
        start: int,
        count: int,
        actor: str,
    ) -> SearchResult:
        """Search a single entity kind."""

    def auto_complete(
        self,
        entity: str,
        query: str,
        facet_filters: dict[str, str],
        limit: int,
        actor: str,
        field: str | None = None,
    ) -> AutoCompleteResult:
        """Return ranked completion candidates (optionally for one field)."""

    def browse(
        self,
        entity: str,
        path: str,
        facet_filters: dict[str, str],
        start: int,
        count: int,
        actor: str,
    ) -> BrowseResult:
        """List entities and child groups at a browse node."""

    def batch_get(self, urns: set[str], actor: str) -> dict[str, EntitySnapshot]:
        """Fetch entities by URN. Missing URNs are absent from the result."""

    def get_browse_paths(self, urn: str, actor: str) -> list[str]:
        """Return the browse path strings of one entity."""
