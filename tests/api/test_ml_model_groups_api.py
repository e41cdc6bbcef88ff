"""Tests for the /api/v1/ml-model-groups endpoints."""

from unittest.mock import MagicMock

from httpx import AsyncClient

from metasearch.core.config import Settings, get_settings
from metasearch.domain.exceptions import EntityClientException
from metasearch.main import app
from tests.factories import ACTOR, GROUP_URN, OTHER_GROUP_URN

BASE = "/api/v1/ml-model-groups"


async def test_requires_bearer_token(client: AsyncClient) -> None:
    response = await client.post(f"{BASE}/batch-load", json={"urns": [GROUP_URN]})
    assert response.status_code == 401


async def test_batch_load(client: AsyncClient, auth_headers: dict, entity_client: MagicMock) -> None:
    response = await client.post(
        f"{BASE}/batch-load",
        json={"urns": [GROUP_URN, OTHER_GROUP_URN, "bogus"]},
        headers=auth_headers,
    )
    assert response.status_code == 200
    results = response.json()["results"]
    assert len(results) == 3
    assert results[0]["data"]["urn"] == GROUP_URN
    assert results[0]["data"]["name"] == "churn-models"
    assert results[0]["data"]["platform"] == "urn:li:dataPlatform:sagemaker"
    assert results[0]["data"]["origin"] == "PROD"
    assert results[0]["data"]["type"] == "MLMODEL_GROUP"
    assert results[1] is None
    assert results[2] is None
    entity_client.batch_get.assert_called_once_with({GROUP_URN, OTHER_GROUP_URN}, ACTOR)


async def test_batch_load_failure_returns_502(
    client: AsyncClient, auth_headers: dict, entity_client: MagicMock
) -> None:
    entity_client.batch_get.side_effect = EntityClientException("batchGet", "timeout")
    response = await client.post(f"{BASE}/batch-load", json={"urns": [GROUP_URN]}, headers=auth_headers)
    assert response.status_code == 502
    assert response.json()["message"] == "Failed to batch load MLModelGroups"


async def test_search(client: AsyncClient, auth_headers: dict, entity_client: MagicMock) -> None:
    response = await client.post(
        f"{BASE}/search",
        json={"query": "churn", "filters": [{"field": "origin", "value": "PROD"}], "count": 20},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["search_results"][0]["entity"]["urn"] == GROUP_URN
    entity_client.search.assert_called_once_with(
        "mlModelGroup", "churn", {"origin": "PROD"}, 0, 20, ACTOR
    )


async def test_search_unknown_facet_returns_400(
    client: AsyncClient, auth_headers: dict, entity_client: MagicMock
) -> None:
    response = await client.post(
        f"{BASE}/search",
        json={"query": "churn", "filters": [{"field": "owner", "value": "jdoe"}]},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Unrecognized facet with name owner provided"
    entity_client.search.assert_not_called()


async def test_autocomplete(client: AsyncClient, auth_headers: dict, entity_client: MagicMock) -> None:
    response = await client.post(
        f"{BASE}/autocomplete", json={"query": "chu", "field": "name", "limit": 3}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json() == {"query": "chu", "suggestions": ["churn-models"]}
    entity_client.auto_complete.assert_called_once_with(
        "mlModelGroup", "chu", {}, 3, ACTOR, field="name"
    )


async def test_browse(client: AsyncClient, auth_headers: dict, entity_client: MagicMock) -> None:
    response = await client.post(
        f"{BASE}/browse", json={"path": ["prod", "sagemaker"]}, headers=auth_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert data["metadata"]["path"] == ["prod", "sagemaker"]
    assert data["groups"] == [{"name": "team-a", "count": 3}]
    assert entity_client.browse.call_args.args[1] == "/prod/sagemaker"


async def test_browse_root(client: AsyncClient, auth_headers: dict, entity_client: MagicMock) -> None:
    response = await client.post(f"{BASE}/browse", json={}, headers=auth_headers)
    assert response.status_code == 200
    assert entity_client.browse.call_args.args[1] == ""


async def test_browse_paths(client: AsyncClient, auth_headers: dict) -> None:
    response = await client.get(f"{BASE}/browse-paths", params={"urn": GROUP_URN}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"paths": [{"path": ["prod", "sagemaker", "churn-models"]}]}


async def test_browse_paths_invalid_urn_returns_400(client: AsyncClient, auth_headers: dict) -> None:
    response = await client.get(
        f"{BASE}/browse-paths", params={"urn": "urn:li:corpuser:jdoe"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "urn"}


async def test_search_page_defaults_come_from_settings(
    client: AsyncClient, auth_headers: dict, entity_client: MagicMock
) -> None:
    app.dependency_overrides[get_settings] = lambda: Settings(
        search_default_start=3, search_default_count=25
    )
    response = await client.post(f"{BASE}/search", json={"query": "churn"}, headers=auth_headers)
    assert response.status_code == 200
    entity_client.search.assert_called_once_with("mlModelGroup", "churn", {}, 3, 25, ACTOR)
