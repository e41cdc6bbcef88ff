"""Mappers from entity service results to search/browse read-models."""

from metasearch.application.dtos.entity_service import (
    AutoCompleteResult,
    BrowseResult,
    SearchResult,
)
from metasearch.application.dtos.search import (
    AggregationMetadataResult,
    AutoCompleteResults,
    BrowsePath,
    BrowseResultGroupResult,
    BrowseResultMetadataResult,
    BrowseResults,
    EntityRef,
    FacetMetadata,
    MatchedFieldResult,
    SearchResultItem,
    SearchResults,
)
from metasearch.application.services.resolver_utils import split_browse_path
from metasearch.core.constants import BROWSE_PATH_DELIMITER
from metasearch.domain.enums import EntityType
from metasearch.domain.value_objects.urn import Urn


def map_urn_to_entity(urn: str) -> EntityRef:
    """Resolve an entity reference from its URN.

    Raises:
        ValueError: If the URN is malformed or names an unknown entity kind.
    """
    parsed = Urn.from_string(urn)
    return EntityRef(urn=urn, type=EntityType.from_entity_name(parsed.entity_type))


def map_urn_search_results(result: SearchResult) -> SearchResults:
    """Map a search page (hits are URNs) to SearchResults."""
    return SearchResults(
        start=result.from_,
        count=result.page_size,
        total=result.num_entities,
        search_results=[
            SearchResultItem(
                entity=map_urn_to_entity(hit.entity),
                matched_fields=[
                    MatchedFieldResult(name=m.name, value=m.value)
                    for m in hit.matched_fields
                ],
            )
            for hit in result.entities
        ],
        facets=[
            FacetMetadata(
                field=agg.name,
                display_name=agg.display_name,
                aggregations=[
                    AggregationMetadataResult(value=value, count=count)
                    for value, count in agg.aggregations.items()
                ],
            )
            for agg in result.aggregations
        ],
    )


def map_auto_complete_results(result: AutoCompleteResult) -> AutoCompleteResults:
    return AutoCompleteResults(query=result.query, suggestions=list(result.suggestions))


def map_browse_results(
    result: BrowseResult, delimiter: str = BROWSE_PATH_DELIMITER
) -> BrowseResults:
    """Map a browse node; metadata.path is split into segments."""
    return BrowseResults(
        entities=[map_urn_to_entity(e.urn) for e in result.entities],
        start=result.from_,
        count=result.page_size,
        total=result.num_entities,
        metadata=BrowseResultMetadataResult(
            path=split_browse_path(result.metadata.path, delimiter),
            total_num_entities=result.metadata.total_num_entities,
        ),
        groups=[
            BrowseResultGroupResult(name=g.name, count=g.count)
            for g in result.metadata.groups
        ],
    )


def map_browse_paths(
    paths: list[str], delimiter: str = BROWSE_PATH_DELIMITER
) -> list[BrowsePath]:
    return [BrowsePath(path=split_browse_path(p, delimiter)) for p in paths]
