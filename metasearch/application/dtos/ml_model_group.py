"""DTOs for the ML model group entity (read-models built from snapshots)."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from metasearch.domain.enums import EntityType, FabricType, OwnershipType

T = TypeVar("T")


@dataclass(frozen=True)
class Owner:
    owner: str
    type: OwnershipType


@dataclass(frozen=True)
class Ownership:
    owners: list[Owner]
    last_modified_actor: str | None = None
    last_modified_time: int | None = None


@dataclass(frozen=True)
class MLModelGroupProperties:
    description: str | None = None
    created_at: int | None = None
    version: str | None = None


@dataclass(frozen=True)
class Status:
    removed: bool = False


@dataclass(frozen=True)
class Deprecation:
    deprecated: bool
    decommission_time: int | None = None
    note: str | None = None
    actor: str | None = None


@dataclass(frozen=True)
class InstitutionalMemoryMetadata:
    """Link documenting the entity (e.g. a wiki page)."""

    url: str
    description: str | None = None
    author: str | None = None
    created_at: int | None = None


@dataclass(frozen=True)
class MLModelGroup:
    """ML model group read-model.

    name, platform and origin come from the URN key; the rest from aspects.
    """

    urn: str
    name: str
    platform: str
    origin: FabricType
    type: EntityType = EntityType.MLMODEL_GROUP
    description: str | None = None
    properties: MLModelGroupProperties | None = None
    ownership: Ownership | None = None
    status: Status | None = None
    deprecation: Deprecation | None = None
    tags: list[str] = field(default_factory=list)
    institutional_memory: list[InstitutionalMemoryMetadata] = field(default_factory=list)
    browse_paths: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class EntityLoadResult(Generic[T]):
    """One batch-load slot: mapped entity plus its raw aspects (local context)."""

    data: T
    local_context: dict[str, Any] = field(default_factory=dict)
