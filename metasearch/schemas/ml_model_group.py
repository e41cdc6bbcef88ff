"""ML model group API schemas."""

from typing import Any

from pydantic import BaseModel, Field

from metasearch.domain.enums import EntityType, FabricType, OwnershipType
from metasearch.schemas.search import BrowsePathResponse, FacetFilterInputModel, ReadModel


class BatchLoadRequest(BaseModel):
    """Body of POST /ml-model-groups/batch-load."""

    urns: list[str]


class MLModelGroupSearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    filters: list[FacetFilterInputModel] | None = None
    start: int | None = Field(None, ge=0, description="Defaults to SEARCH_DEFAULT_START")
    count: int | None = Field(None, ge=0, description="Defaults to SEARCH_DEFAULT_COUNT")


class MLModelGroupAutoCompleteRequest(BaseModel):
    query: str = Field(..., min_length=1)
    field: str | None = None
    filters: list[FacetFilterInputModel] | None = None
    limit: int = Field(10, ge=1)


class MLModelGroupBrowseRequest(BaseModel):
    """Browse under path (ordered segments; empty list is the root)."""

    path: list[str] = []
    filters: list[FacetFilterInputModel] | None = None
    start: int | None = Field(None, ge=0, description="Defaults to SEARCH_DEFAULT_START")
    count: int | None = Field(None, ge=0, description="Defaults to SEARCH_DEFAULT_COUNT")


class OwnerResponse(ReadModel):
    owner: str
    type: OwnershipType


class OwnershipResponse(ReadModel):
    owners: list[OwnerResponse]
    last_modified_actor: str | None = None
    last_modified_time: int | None = None


class MLModelGroupPropertiesResponse(ReadModel):
    description: str | None = None
    created_at: int | None = None
    version: str | None = None


class StatusResponse(ReadModel):
    removed: bool


class DeprecationResponse(ReadModel):
    deprecated: bool
    decommission_time: int | None = None
    note: str | None = None
    actor: str | None = None


class InstitutionalMemoryResponse(ReadModel):
    url: str
    description: str | None = None
    author: str | None = None
    created_at: int | None = None


class MLModelGroupResponse(ReadModel):
    """ML model group."""

    urn: str
    type: EntityType
    name: str
    platform: str
    origin: FabricType
    description: str | None = None
    properties: MLModelGroupPropertiesResponse | None = None
    ownership: OwnershipResponse | None = None
    status: StatusResponse | None = None
    deprecation: DeprecationResponse | None = None
    tags: list[str] = []
    institutional_memory: list[InstitutionalMemoryResponse] = []
    browse_paths: list[str] = []


class EntityLoadResultResponse(ReadModel):
    data: MLModelGroupResponse
    local_context: dict[str, Any] = {}


class BatchLoadResponse(BaseModel):
    """One slot per requested URN, in request order; null when not found."""

    results: list[EntityLoadResultResponse | None]


class BrowsePathsResponse(BaseModel):
    paths: list[BrowsePathResponse]
