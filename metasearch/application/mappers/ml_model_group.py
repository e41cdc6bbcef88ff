"""Mapper from an ML model group snapshot (URN + aspects) to MLModelGroup.

Aspect payloads are the entity service's JSON objects keyed by the aspect's
short name. Unknown aspects are ignored; missing aspects leave the
corresponding field empty.
"""

from typing import Any

from metasearch.application.dtos.entity_service import EntitySnapshot
from metasearch.application.dtos.ml_model_group import (
    Deprecation,
    InstitutionalMemoryMetadata,
    MLModelGroup,
    MLModelGroupProperties,
    Owner,
    Ownership,
    Status,
)
from metasearch.domain.enums import OwnershipType
from metasearch.domain.value_objects.urn import MLModelGroupUrn

ML_MODEL_GROUP_SNAPSHOT = "MLModelGroupSnapshot"


def extract_aspects(snapshot: EntitySnapshot) -> dict[str, Any]:
    """Return the raw aspects of a snapshot (used as batch-load local context)."""
    return dict(snapshot.aspects)


def _map_properties(raw: dict[str, Any]) -> MLModelGroupProperties:
    version = raw.get("version")
    if isinstance(version, dict):
        version = version.get("versionTag")
    return MLModelGroupProperties(
        description=raw.get("description"),
        created_at=raw.get("createdAt"),
        version=version,
    )


def _owner_type(raw: str | None) -> OwnershipType:
    """Unknown or missing owner roles map to NONE."""
    if raw in OwnershipType.values():
        return OwnershipType(raw)
    return OwnershipType.NONE


def _map_ownership(raw: dict[str, Any]) -> Ownership:
    last_modified = raw.get("lastModified") or {}
    return Ownership(
        owners=[
            Owner(owner=o["owner"], type=_owner_type(o.get("type")))
            for o in raw.get("owners", [])
        ],
        last_modified_actor=last_modified.get("actor"),
        last_modified_time=last_modified.get("time"),
    )


def _map_deprecation(raw: dict[str, Any]) -> Deprecation:
    return Deprecation(
        deprecated=bool(raw.get("deprecated", False)),
        decommission_time=raw.get("decommissionTime"),
        note=raw.get("note"),
        actor=raw.get("actor"),
    )


def _map_institutional_memory(raw: dict[str, Any]) -> list[InstitutionalMemoryMetadata]:
    elements = []
    for element in raw.get("elements", []):
        stamp = element.get("createStamp") or {}
        elements.append(
            InstitutionalMemoryMetadata(
                url=element["url"],
                description=element.get("description"),
                author=stamp.get("actor"),
                created_at=stamp.get("time"),
            )
        )
    return elements


def map_ml_model_group_snapshot(snapshot: EntitySnapshot) -> MLModelGroup:
    """Build MLModelGroup from a snapshot.

    Raises:
        ValueError: If the snapshot URN is not a valid ML model group URN.
        KeyError: If a present aspect lacks a required field.
    """
    urn = MLModelGroupUrn.from_string(snapshot.urn)
    aspects = snapshot.aspects

    properties = None
    if "MLModelGroupProperties" in aspects:
        properties = _map_properties(aspects["MLModelGroupProperties"])
    ownership = None
    if "Ownership" in aspects:
        ownership = _map_ownership(aspects["Ownership"])
    status = None
    if "Status" in aspects:
        status = Status(removed=bool(aspects["Status"].get("removed", False)))
    deprecation = None
    if "Deprecation" in aspects:
        deprecation = _map_deprecation(aspects["Deprecation"])

    tags = [t["tag"] for t in aspects.get("GlobalTags", {}).get("tags", [])]
    memory = _map_institutional_memory(aspects.get("InstitutionalMemory", {}))
    browse_paths = list(aspects.get("BrowsePaths", {}).get("paths", []))

    return MLModelGroup(
        urn=str(urn),
        name=urn.name,
        platform=str(urn.platform),
        origin=urn.origin,
        description=properties.description if properties else None,
        properties=properties,
        ownership=ownership,
        status=status,
        deprecation=deprecation,
        tags=tags,
        institutional_memory=memory,
        browse_paths=browse_paths,
    )
