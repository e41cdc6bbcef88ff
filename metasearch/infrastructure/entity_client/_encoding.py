"""Encode requests for, and decode responses from, the entity service JSON API.

Pure functions; no I/O. Decoders raise KeyError/TypeError/ValueError on
malformed payloads, which the client reports as EntityClientException.
"""

from __future__ import annotations

from typing import Any

from metasearch.application.dtos.entity_service import (
    AggregationMetadata,
    AutoCompleteResult,
    BrowseResult,
    BrowseResultEntity,
    BrowseResultGroup,
    BrowseResultMetadata,
    Criterion,
    EntitySnapshot,
    Filter,
    MatchedField,
    SearchEntity,
    SearchResult,
)


def _short_name(fqcn: str) -> str:
    """'com.linkedin.common.Ownership' -> 'Ownership'."""
    return fqcn.rsplit(".", 1)[-1]


def _encode_criteria(criteria: list[Criterion]) -> dict[str, Any]:
    return {
        "or": [
            {
                "and": [
                    {"field": c.field, "value": c.value, "condition": c.condition}
                    for c in criteria
                ]
            }
        ]
    }


def encode_filter(search_filter: Filter | None) -> dict[str, Any] | None:
    """Filter -> wire filter; None stays None (no filter)."""
    if search_filter is None or not search_filter.criteria:
        return None
    return _encode_criteria(search_filter.criteria)


def encode_facet_filters(facet_filters: dict[str, str]) -> dict[str, Any] | None:
    """Facet map -> wire filter (AND of equality criteria); empty map -> None."""
    if not facet_filters:
        return None
    return _encode_criteria(
        [Criterion(field=k, value=v) for k, v in facet_filters.items()]
    )


def decode_search_result(raw: dict[str, Any]) -> SearchResult:
    metadata = raw.get("metadata") or {}
    return SearchResult(
        entities=[
            SearchEntity(
                entity=e["entity"],
                matched_fields=[
                    MatchedField(name=m["name"], value=str(m["value"]))
                    for m in e.get("matchedFields", [])
                ],
            )
            for e in raw.get("entities", [])
        ],
        from_=int(raw["from"]),
        page_size=int(raw["pageSize"]),
        num_entities=int(raw["numEntities"]),
        aggregations=[
            AggregationMetadata(
                name=a["name"],
                display_name=a.get("displayName"),
                aggregations={str(k): int(v) for k, v in a.get("aggregations", {}).items()},
            )
            for a in metadata.get("aggregations", [])
        ],
    )


def decode_auto_complete_result(raw: dict[str, Any]) -> AutoCompleteResult:
    return AutoCompleteResult(
        query=raw["query"],
        suggestions=[str(s) for s in raw.get("suggestions", [])],
    )


def decode_browse_result(raw: dict[str, Any]) -> BrowseResult:
    metadata = raw["metadata"]
    return BrowseResult(
        entities=[
            BrowseResultEntity(urn=e["urn"], name=e.get("name"))
            for e in raw.get("entities", [])
        ],
        from_=int(raw["from"]),
        page_size=int(raw["pageSize"]),
        num_entities=int(raw["numEntities"]),
        metadata=BrowseResultMetadata(
            path=metadata.get("path", ""),
            groups=[
                BrowseResultGroup(name=g["name"], count=int(g["count"]))
                for g in metadata.get("groups", [])
            ],
            total_num_entities=int(metadata.get("totalNumEntities", 0)),
        ),
    )


def decode_entity(raw: dict[str, Any]) -> EntitySnapshot:
    """Decode a rest.li Entity: {"value": {"<snapshot fqcn>": {"urn", "aspects"}}}.

    Each aspect is a single-key union {"<aspect fqcn>": {...}}.
    """
    value = raw["value"]
    if len(value) != 1:
        raise ValueError(f"Entity value must hold exactly one snapshot, got {list(value)}")
    snapshot_fqcn, snapshot = next(iter(value.items()))
    aspects: dict[str, dict[str, Any]] = {}
    for aspect_union in snapshot.get("aspects", []):
        for aspect_fqcn, aspect in aspect_union.items():
            aspects[_short_name(aspect_fqcn)] = aspect
    return EntitySnapshot(
        urn=snapshot["urn"],
        snapshot_type=_short_name(snapshot_fqcn),
        aspects=aspects,
    )


def decode_batch_get(raw: dict[str, Any]) -> dict[str, EntitySnapshot]:
    """Decode {urn: Entity}; URNs not found are simply absent."""
    return {urn: decode_entity(entity) for urn, entity in raw.items()}
