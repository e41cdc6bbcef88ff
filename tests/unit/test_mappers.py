"""Tests for search/browse result mappers and the ML model group snapshot mapper."""

import pytest

from metasearch.application.dtos.entity_service import (
    AggregationMetadata,
    MatchedField,
    SearchEntity,
    SearchResult,
)
from metasearch.application.mappers import (
    map_browse_paths,
    map_ml_model_group_snapshot,
    map_urn_search_results,
    map_urn_to_entity,
)
from metasearch.domain.enums import EntityType, OwnershipType
from tests.factories import DATASET_URN, GROUP_URN, make_snapshot


def test_map_urn_to_entity() -> None:
    ref = map_urn_to_entity("urn:li:corpuser:jdoe")
    assert ref.urn == "urn:li:corpuser:jdoe"
    assert ref.type == EntityType.CORP_USER


def test_map_urn_to_entity_unknown_kind() -> None:
    with pytest.raises(ValueError):
        map_urn_to_entity("urn:li:notebook:123")


def test_map_urn_search_results_with_facets_and_matches() -> None:
    result = SearchResult(
        entities=[
            SearchEntity(DATASET_URN, [MatchedField("name", "db.users")]),
        ],
        from_=10,
        page_size=5,
        num_entities=42,
        aggregations=[
            AggregationMetadata("platform", {"hive": 30, "kafka": 12}, display_name="Platform"),
        ],
    )
    mapped = map_urn_search_results(result)
    assert (mapped.start, mapped.count, mapped.total) == (10, 5, 42)
    assert mapped.search_results[0].entity.type == EntityType.DATASET
    assert mapped.search_results[0].matched_fields[0].value == "db.users"
    facet = mapped.facets[0]
    assert facet.field == "platform"
    assert facet.display_name == "Platform"
    assert [(a.value, a.count) for a in facet.aggregations] == [("hive", 30), ("kafka", 12)]


def test_map_urn_search_results_empty_page() -> None:
    mapped = map_urn_search_results(SearchResult(entities=[], from_=0, page_size=10, num_entities=0))
    assert mapped.search_results == []
    assert mapped.facets == []
    assert mapped.total == 0


def test_map_browse_paths_splits_segments() -> None:
    paths = map_browse_paths(["/prod/sagemaker", ""])
    assert [p.path for p in paths] == [["prod", "sagemaker"], []]


def test_snapshot_without_aspects() -> None:
    group = map_ml_model_group_snapshot(make_snapshot())
    assert group.urn == GROUP_URN
    assert group.name == "churn-models"
    assert group.type == EntityType.MLMODEL_GROUP
    assert group.properties is None
    assert group.ownership is None
    assert group.tags == []
    assert group.institutional_memory == []


def test_snapshot_with_all_aspects() -> None:
    snapshot = make_snapshot(
        MLModelGroupProperties={"description": "Churn", "createdAt": 1700000000000, "version": "2"},
        Ownership={
            "owners": [{"owner": "urn:li:corpuser:jdoe", "type": "DATAOWNER"}],
            "lastModified": {"actor": "urn:li:corpuser:admin", "time": 1},
        },
        Status={"removed": True},
        Deprecation={"deprecated": True, "note": "use v2", "actor": "urn:li:corpuser:admin"},
        InstitutionalMemory={
            "elements": [
                {
                    "url": "https://wiki/churn",
                    "description": "Design doc",
                    "createStamp": {"actor": "urn:li:corpuser:jdoe", "time": 5},
                }
            ]
        },
        BrowsePaths={"paths": ["/prod/sagemaker"]},
        SomeFutureAspect={"x": 1},
    )
    group = map_ml_model_group_snapshot(snapshot)
    assert group.description == "Churn"
    assert group.properties.created_at == 1700000000000
    assert group.properties.version == "2"
    assert group.ownership.owners[0].owner == "urn:li:corpuser:jdoe"
    assert group.ownership.owners[0].type == "DATAOWNER"
    assert group.ownership.last_modified_actor == "urn:li:corpuser:admin"
    assert group.status.removed is True
    assert group.deprecation.note == "use v2"
    assert group.institutional_memory[0].author == "urn:li:corpuser:jdoe"
    assert group.institutional_memory[0].created_at == 5
    assert group.browse_paths == ["/prod/sagemaker"]


def test_snapshot_with_invalid_urn() -> None:
    with pytest.raises(ValueError):
        map_ml_model_group_snapshot(make_snapshot(DATASET_URN))


def test_unknown_owner_role_maps_to_none() -> None:
    group = map_ml_model_group_snapshot(
        make_snapshot(Ownership={"owners": [{"owner": "urn:li:corpuser:a", "type": "WIZARD"}, {"owner": "urn:li:corpuser:b"}]})
    )
    assert [o.type for o in group.ownership.owners] == [OwnershipType.NONE, OwnershipType.NONE]
