"""Pytest configuration and fixtures for metasearch.

Settings are read from the environment, so SECRET_KEY is set before the app
is imported. HTTP tests use metasearch.main:app with the entity client and
search worker pool overridden (the lifespan does not run under ASGITransport).
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-metasearch")
os.environ.setdefault("ENTITY_SERVICE_URL", "http://entity-service.test")

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from metasearch.api.v1.dependencies import get_entity_client, get_search_executor
from metasearch.application.dtos.entity_service import AutoCompleteResult
from metasearch.core.limiter import limiter
from metasearch.infrastructure.security.jwt import create_access_token
from metasearch.main import app
from metasearch.shared.context import QueryContext
from tests.factories import (
    ACTOR,
    DATASET_URN,
    GROUP_URN,
    make_browse_result,
    make_search_result,
    make_snapshot,
)


@pytest.fixture
def context() -> QueryContext:
    return QueryContext(actor=ACTOR, request_id="req-1")


@pytest.fixture
def entity_client() -> MagicMock:
    """Entity client double with happy-path return values."""
    client = MagicMock()
    client.search_across_entities.return_value = make_search_result(DATASET_URN, GROUP_URN)
    client.search.return_value = make_search_result(GROUP_URN)
    client.auto_complete.return_value = AutoCompleteResult(
        query="chu", suggestions=["churn-models"]
    )
    client.browse.return_value = make_browse_result()
    client.batch_get.return_value = {GROUP_URN: make_snapshot()}
    client.get_browse_paths.return_value = ["/prod/sagemaker/churn-models"]
    return client


@pytest.fixture
def executor():
    pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="test-search-worker")
    yield pool
    pool.shutdown(wait=True, cancel_futures=True)


@pytest.fixture
async def client(entity_client: MagicMock, executor: ThreadPoolExecutor) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with a fake entity client."""
    app.dependency_overrides[get_entity_client] = lambda: entity_client
    app.dependency_overrides[get_search_executor] = lambda: executor
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer token whose subject is the bare user name 'jdoe'."""
    return {"Authorization": f"Bearer {create_access_token('jdoe')}"}
