"""Entity type interfaces: one implementation per entity kind.

An entity kind implements the capabilities it supports. Each implementation
is configured with its own downstream entity name and facet-field allow-list
instead of a shared handler branching on the kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from metasearch.domain.enums import EntityType

if TYPE_CHECKING:
    from metasearch.application.dtos.ml_model_group import EntityLoadResult
    from metasearch.application.dtos.search import (
        AutoCompleteResults,
        BrowsePath,
        BrowseResults,
        FacetFilterInput,
        SearchResults,
    )
    from metasearch.shared.context import QueryContext

T = TypeVar("T", covariant=True)


@runtime_checkable
class LoadableEntityType(Protocol[T]):
    """Entity kind whose instances can be batch-loaded by URN."""

    def type(self) -> EntityType:
        """Entity kind served by this implementation."""

    def batch_load(
        self, urns: list[str], context: QueryContext
    ) -> list[EntityLoadResult[T] | None]:
        """Load entities in input order; None marks a URN that was not found."""


@runtime_checkable
class SearchableEntityType(LoadableEntityType[T], Protocol[T]):
    """Entity kind that supports search and autocomplete."""

    def search(
        self,
        query: str,
        filters: list[FacetFilterInput] | None,
        start: int | None,
        count: int | None,
        context: QueryContext,
    ) -> SearchResults:
        """Full-text search within this entity kind."""

    def auto_complete(
        self,
        query: str,
        field: str | None,
        filters: list[FacetFilterInput] | None,
        limit: int,
        context: QueryContext,
    ) -> AutoCompleteResults:
        """Completion candidates for a query prefix."""


@runtime_checkable
class BrowsableEntityType(LoadableEntityType[T], Protocol[T]):
    """Entity kind that can be browsed as a path tree."""

    def browse(
        self,
        path: list[str],
        filters: list[FacetFilterInput] | None,
        start: int | None,
        count: int | None,
        context: QueryContext,
    ) -> BrowseResults:
        """List entities and child groups under a path."""

    def browse_paths(self, urn: str, context: QueryContext) -> list[BrowsePath]:
        """Browse locations of one entity."""
