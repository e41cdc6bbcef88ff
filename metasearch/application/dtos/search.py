"""DTOs for search, autocomplete, and browse (inputs and read-models)."""

from dataclasses import dataclass, field

from metasearch.domain.enums import EntityType


@dataclass(frozen=True)
class FacetFilterInput:
    """Equality constraint on a named indexed field."""

    field: str
    value: str


@dataclass(frozen=True)
class SearchAcrossEntitiesInput:
    """Input of a cross-entity search. None start/count fall back to configured defaults."""

    query: str | None
    types: list[EntityType] | None = None
    filters: list[FacetFilterInput] | None = None
    start: int | None = None
    count: int | None = None


@dataclass(frozen=True)
class EntityRef:
    """Reference to a catalog entity (URN and kind)."""

    urn: str
    type: EntityType


@dataclass(frozen=True)
class MatchedFieldResult:
    name: str
    value: str


@dataclass(frozen=True)
class SearchResultItem:
    """Single hit in SearchResults."""

    entity: EntityRef
    matched_fields: list[MatchedFieldResult] = field(default_factory=list)


@dataclass(frozen=True)
class AggregationMetadataResult:
    value: str
    count: int


@dataclass(frozen=True)
class FacetMetadata:
    """Facet with per-value counts for the current result set."""

    field: str
    display_name: str | None
    aggregations: list[AggregationMetadataResult]


@dataclass(frozen=True)
class SearchResults:
    """Page of search results with total count and facets."""

    start: int
    count: int
    total: int
    search_results: list[SearchResultItem]
    facets: list[FacetMetadata] = field(default_factory=list)


@dataclass(frozen=True)
class AutoCompleteResults:
    query: str
    suggestions: list[str]


@dataclass(frozen=True)
class BrowseResultGroupResult:
    name: str
    count: int


@dataclass(frozen=True)
class BrowseResultMetadataResult:
    """Browse node path as segments, plus the number of entities below it."""

    path: list[str]
    total_num_entities: int


@dataclass(frozen=True)
class BrowseResults:
    """Entities and child groups at one browse node."""

    entities: list[EntityRef]
    start: int
    count: int
    total: int
    metadata: BrowseResultMetadataResult
    groups: list[BrowseResultGroupResult] = field(default_factory=list)


@dataclass(frozen=True)
class BrowsePath:
    """One browse location of an entity, as ordered segments."""

    path: list[str]
