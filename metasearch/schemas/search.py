"""Search API schemas (request bodies and responses)."""

from pydantic import BaseModel, ConfigDict, Field

from metasearch.application.dtos.search import FacetFilterInput, SearchAcrossEntitiesInput
from metasearch.domain.enums import EntityType


class ReadModel(BaseModel):
    """Base for responses built from application dataclasses."""

    model_config = ConfigDict(from_attributes=True)


class FacetFilterInputModel(BaseModel):
    """Equality filter on an indexed field."""

    field: str = Field(..., min_length=1)
    value: str

    def to_dto(self) -> FacetFilterInput:
        return FacetFilterInput(field=self.field, value=self.value)


def filters_to_dto(filters: list[FacetFilterInputModel] | None) -> list[FacetFilterInput] | None:
    if filters is None:
        return None
    return [f.to_dto() for f in filters]


class SearchAcrossEntitiesRequest(BaseModel):
    """Body of POST /search/across-entities.

    query is validated by the resolver (blank queries are rejected there),
    so it is optional here.
    """

    query: str | None = None
    types: list[EntityType] | None = Field(
        None, description="Entity kinds to search; omitted or empty means the default set"
    )
    filters: list[FacetFilterInputModel] | None = None
    start: int | None = Field(None, ge=0)
    count: int | None = Field(None, ge=0)

    def to_dto(self) -> SearchAcrossEntitiesInput:
        return SearchAcrossEntitiesInput(
            query=self.query,
            types=self.types,
            filters=filters_to_dto(self.filters),
            start=self.start,
            count=self.count,
        )


class EntityRefResponse(ReadModel):
    urn: str
    type: EntityType


class MatchedFieldResponse(ReadModel):
    name: str
    value: str


class SearchResultItemResponse(ReadModel):
    entity: EntityRefResponse
    matched_fields: list[MatchedFieldResponse] = []


class AggregationMetadataResponse(ReadModel):
    value: str
    count: int


class FacetMetadataResponse(ReadModel):
    field: str
    display_name: str | None = None
    aggregations: list[AggregationMetadataResponse]


class SearchResultsResponse(ReadModel):
    """Page of search results."""

    start: int
    count: int
    total: int
    search_results: list[SearchResultItemResponse]
    facets: list[FacetMetadataResponse] = []


class AutoCompleteResultsResponse(ReadModel):
    query: str
    suggestions: list[str]


class BrowseResultGroupResponse(ReadModel):
    name: str
    count: int


class BrowseResultMetadataResponse(ReadModel):
    path: list[str]
    total_num_entities: int


class BrowseResultsResponse(ReadModel):
    """Entities and child groups at one browse node."""

    entities: list[EntityRefResponse]
    start: int
    count: int
    total: int
    metadata: BrowseResultMetadataResponse
    groups: list[BrowseResultGroupResponse] = []


class BrowsePathResponse(ReadModel):
    path: list[str]
