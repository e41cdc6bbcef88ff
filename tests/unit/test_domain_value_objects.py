"""Tests for URN value objects and entity type names."""

import pytest

from metasearch.domain.enums import EntityType, FabricType
from metasearch.domain.value_objects import DataPlatformUrn, MLModelGroupUrn, Urn
from tests.factories import DATASET_URN, GROUP_URN


def test_urn_parses_plain_key() -> None:
    urn = Urn.from_string("urn:li:corpuser:jdoe")
    assert urn.entity_type == "corpuser"
    assert urn.parts == ("jdoe",)
    assert str(urn) == "urn:li:corpuser:jdoe"


def test_urn_parses_nested_tuple_key() -> None:
    urn = Urn.from_string(DATASET_URN)
    assert urn.entity_type == "dataset"
    assert urn.parts == ("urn:li:dataPlatform:hive", "db.users", "PROD")
    assert str(urn) == DATASET_URN


@pytest.mark.parametrize(
    "value",
    [
        "",
        "dataset:x",
        "urn:li:",
        "urn:li:dataset",
        "urn:li:dataset:",
        "urn:li:dataset:(a,b",
        "urn:li:dataset:(a,,b)",
        "urn:li:dataset:(a,b))",
    ],
)
def test_urn_rejects_malformed(value) -> None:
    with pytest.raises(ValueError):
        Urn.from_string(value)


def test_ml_model_group_urn_round_trip() -> None:
    urn = MLModelGroupUrn.from_string(GROUP_URN)
    assert urn.platform == DataPlatformUrn("sagemaker")
    assert urn.name == "churn-models"
    assert urn.origin == FabricType.PROD
    assert str(urn) == GROUP_URN


@pytest.mark.parametrize(
    "value",
    [
        DATASET_URN,
        "urn:li:mlModelGroup:(urn:li:dataPlatform:sagemaker,churn-models)",
        "urn:li:mlModelGroup:(urn:li:dataPlatform:sagemaker,churn-models,MOON)",
        "urn:li:mlModelGroup:(urn:li:dataset:x,churn-models,PROD)",
    ],
)
def test_ml_model_group_urn_rejects_invalid(value) -> None:
    with pytest.raises(ValueError):
        MLModelGroupUrn.from_string(value)


def test_entity_type_names() -> None:
    assert EntityType.MLMODEL_GROUP.entity_name == "mlModelGroup"
    assert EntityType.CORP_USER.entity_name == "corpuser"
    assert EntityType.from_entity_name("dataset") == EntityType.DATASET


def test_entity_type_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown entity name"):
        EntityType.from_entity_name("notebook")


def test_every_entity_type_has_a_name() -> None:
    for entity_type in EntityType:
        assert EntityType.from_entity_name(entity_type.entity_name) is entity_type
