"""Tests for MLModelGroupType (mocked entity client)."""

from unittest.mock import MagicMock

import pytest

from metasearch.application.dtos.search import FacetFilterInput
from metasearch.application.interfaces import (
    BrowsableEntityType,
    LoadableEntityType,
    SearchableEntityType,
)
from metasearch.application.use_cases import MLModelGroupType
from metasearch.domain.enums import EntityType, FabricType
from metasearch.domain.exceptions import (
    EntityClientException,
    ResolverException,
    ValidationException,
)
from tests.factories import ACTOR, GROUP_URN, OTHER_GROUP_URN, make_browse_result, make_snapshot


@pytest.fixture
def entity_type(entity_client: MagicMock) -> MLModelGroupType:
    return MLModelGroupType(entity_client)


def test_type_is_ml_model_group(entity_type) -> None:
    assert entity_type.type() == EntityType.MLMODEL_GROUP


def test_batch_load_preserves_order_with_missing_slots(entity_type, entity_client, context) -> None:
    """Results align with input; URNs the service did not return are None."""
    entity_client.batch_get.return_value = {
        OTHER_GROUP_URN: make_snapshot(OTHER_GROUP_URN),
        GROUP_URN: make_snapshot(GROUP_URN),
    }
    missing = "urn:li:mlModelGroup:(urn:li:dataPlatform:sagemaker,gone,PROD)"
    results = entity_type.batch_load([GROUP_URN, missing, OTHER_GROUP_URN], context)
    assert len(results) == 3
    assert results[0].data.urn == GROUP_URN
    assert results[1] is None
    assert results[2].data.urn == OTHER_GROUP_URN


def test_batch_load_single_call_with_deduped_keys(entity_type, entity_client, context) -> None:
    results = entity_type.batch_load([GROUP_URN, GROUP_URN], context)
    entity_client.batch_get.assert_called_once_with({GROUP_URN}, ACTOR)
    assert len(results) == 2
    assert results[0].data == results[1].data


def test_batch_load_invalid_urn_yields_none(entity_type, entity_client, context) -> None:
    results = entity_type.batch_load(["not-an-urn", GROUP_URN], context)
    assert results[0] is None
    assert results[1].data.name == "churn-models"
    entity_client.batch_get.assert_called_once_with({GROUP_URN}, ACTOR)


def test_batch_load_empty(entity_type, entity_client, context) -> None:
    entity_client.batch_get.return_value = {}
    assert entity_type.batch_load([], context) == []


def test_batch_load_maps_aspects(entity_type, entity_client, context) -> None:
    entity_client.batch_get.return_value = {
        GROUP_URN: make_snapshot(
            MLModelGroupProperties={"description": "Churn models", "version": {"versionTag": "3"}},
            GlobalTags={"tags": [{"tag": "urn:li:tag:pii"}]},
        )
    }
    [result] = entity_type.batch_load([GROUP_URN], context)
    group = result.data
    assert group.platform == "urn:li:dataPlatform:sagemaker"
    assert group.origin == FabricType.PROD
    assert group.description == "Churn models"
    assert group.properties.version == "3"
    assert group.tags == ["urn:li:tag:pii"]
    assert "GlobalTags" in result.local_context


def test_batch_load_failure_wrapped(entity_type, entity_client, context) -> None:
    cause = EntityClientException("batchGet", "timeout")
    entity_client.batch_get.side_effect = cause
    with pytest.raises(ResolverException) as exc_info:
        entity_type.batch_load([GROUP_URN], context)
    assert exc_info.value.message == "Failed to batch load MLModelGroups"
    assert exc_info.value.details == {"urns": [GROUP_URN]}
    assert exc_info.value.__cause__ is cause


def test_search_passes_facets_and_paging(entity_type, entity_client, context) -> None:
    results = entity_type.search(
        "churn",
        [FacetFilterInput(field="platform", value="urn:li:dataPlatform:sagemaker")],
        0,
        20,
        context,
    )
    entity_client.search.assert_called_once_with(
        "mlModelGroup",
        "churn",
        {"platform": "urn:li:dataPlatform:sagemaker"},
        0,
        20,
        ACTOR,
    )
    assert results.search_results[0].entity.type == EntityType.MLMODEL_GROUP


def test_search_unknown_facet_rejected(entity_type, entity_client, context) -> None:
    with pytest.raises(ValidationException) as exc_info:
        entity_type.search("churn", [FacetFilterInput(field="owner", value="x")], 0, 10, context)
    assert exc_info.value.message == "Unrecognized facet with name owner provided"
    entity_client.search.assert_not_called()


def test_search_failure_wrapped(entity_type, entity_client, context) -> None:
    entity_client.search.side_effect = EntityClientException("search", "boom", 500)
    with pytest.raises(ResolverException) as exc_info:
        entity_type.search("churn", None, 0, 10, context)
    assert "search for mlModelGroup" in exc_info.value.message
    assert exc_info.value.details["query"] == "churn"


def test_auto_complete_forwards_field_and_limit(entity_type, entity_client, context) -> None:
    results = entity_type.auto_complete("chu", "name", None, 5, context)
    entity_client.auto_complete.assert_called_once_with(
        "mlModelGroup", "chu", {}, 5, ACTOR, field="name"
    )
    assert results.query == "chu"
    assert results.suggestions == ["churn-models"]


def test_auto_complete_failure_wrapped(entity_type, entity_client, context) -> None:
    entity_client.auto_complete.side_effect = RuntimeError("down")
    with pytest.raises(ResolverException, match="autocomplete for mlModelGroup"):
        entity_type.auto_complete("chu", None, None, 5, context)


@pytest.mark.parametrize(
    ("path", "expected"),
    [([], ""), (["prod"], "/prod"), (["prod", "sagemaker"], "/prod/sagemaker")],
)
def test_browse_path_joined(entity_type, entity_client, context, path, expected) -> None:
    entity_type.browse(path, None, 0, 10, context)
    assert entity_client.browse.call_args.args[1] == expected


def test_browse_result_mapped(entity_type, entity_client, context) -> None:
    entity_client.browse.return_value = make_browse_result("/prod/sagemaker")
    results = entity_type.browse(["prod", "sagemaker"], None, 0, 10, context)
    assert results.metadata.path == ["prod", "sagemaker"]
    assert results.metadata.total_num_entities == 4
    assert results.groups[0].name == "team-a"
    assert results.entities[0].urn == GROUP_URN


def test_browse_failure_wrapped(entity_type, entity_client, context) -> None:
    entity_client.browse.side_effect = EntityClientException("browse", "boom")
    with pytest.raises(ResolverException) as exc_info:
        entity_type.browse(["prod"], None, 0, 10, context)
    assert exc_info.value.details["path"] == "/prod"


def test_browse_paths(entity_type, entity_client, context) -> None:
    entity_client.get_browse_paths.return_value = ["/prod/sagemaker/churn-models", "/team-a"]
    paths = entity_type.browse_paths(GROUP_URN, context)
    entity_client.get_browse_paths.assert_called_once_with(GROUP_URN, ACTOR)
    assert [p.path for p in paths] == [["prod", "sagemaker", "churn-models"], ["team-a"]]


def test_browse_paths_invalid_urn(entity_type, entity_client, context) -> None:
    with pytest.raises(ValidationException):
        entity_type.browse_paths("urn:li:dataset:(urn:li:dataPlatform:hive,x,PROD)", context)
    entity_client.get_browse_paths.assert_not_called()


def test_browse_paths_failure_wrapped(entity_type, entity_client, context) -> None:
    entity_client.get_browse_paths.side_effect = EntityClientException("getBrowsePaths", "boom")
    with pytest.raises(ResolverException, match="browse paths lookup"):
        entity_type.browse_paths(GROUP_URN, context)


def test_implements_entity_type_interfaces(entity_type) -> None:
    assert isinstance(entity_type, LoadableEntityType)
    assert isinstance(entity_type, SearchableEntityType)
    assert isinstance(entity_type, BrowsableEntityType)


def test_search_and_browse_use_configured_page_defaults(entity_client, context) -> None:
    entity_type = MLModelGroupType(entity_client, default_start=5, default_count=50)
    entity_type.search("churn", None, None, None, context)
    entity_type.browse([], None, None, 7, context)
    assert entity_client.search.call_args.args[3:5] == (5, 50)
    assert entity_client.browse.call_args.args[3:5] == (5, 7)
