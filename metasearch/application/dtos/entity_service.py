"""DTOs exchanged with the downstream entity service (no dependency on HTTP).

The client decodes wire payloads into these; resolvers hand them to mappers.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Criterion:
    """Single filter criterion: field compared to value."""

    field: str
    value: str
    condition: str = "EQUAL"


@dataclass(frozen=True)
class Filter:
    """Conjunction of criteria sent with a cross-entity search."""

    criteria: list[Criterion]


@dataclass(frozen=True)
class MatchedField:
    """Field of a hit that matched the query."""

    name: str
    value: str


@dataclass(frozen=True)
class SearchEntity:
    """One search hit: entity URN plus the fields that matched."""

    entity: str
    matched_fields: list[MatchedField] = field(default_factory=list)


@dataclass(frozen=True)
class AggregationMetadata:
    """Facet aggregation: facet name and value -> document count."""

    name: str
    aggregations: dict[str, int]
    display_name: str | None = None


@dataclass(frozen=True)
class SearchResult:
    """Page of search hits as returned by search / searchAcrossEntities."""

    entities: list[SearchEntity]
    from_: int
    page_size: int
    num_entities: int
    aggregations: list[AggregationMetadata] = field(default_factory=list)


@dataclass(frozen=True)
class AutoCompleteResult:
    """Ranked completion candidates for a query prefix."""

    query: str
    suggestions: list[str]


@dataclass(frozen=True)
class BrowseResultEntity:
    """Entity listed at a browse node."""

    urn: str
    name: str | None = None


@dataclass(frozen=True)
class BrowseResultGroup:
    """Child node of a browse node with its entity count."""

    name: str
    count: int


@dataclass(frozen=True)
class BrowseResultMetadata:
    """Browse node metadata: the node path, its children, and the total below it."""

    path: str
    groups: list[BrowseResultGroup]
    total_num_entities: int


@dataclass(frozen=True)
class BrowseResult:
    """Entities and child groups at one browse node."""

    entities: list[BrowseResultEntity]
    from_: int
    page_size: int
    num_entities: int
    metadata: BrowseResultMetadata


@dataclass(frozen=True)
class EntitySnapshot:
    """Entity returned by batchGet: URN, snapshot type, and aspects by short name.

    aspects maps e.g. 'Ownership' or 'MLModelGroupProperties' to the raw
    aspect payload.
    """

    urn: str
    snapshot_type: str
    aspects: dict[str, dict[str, Any]] = field(default_factory=dict)
