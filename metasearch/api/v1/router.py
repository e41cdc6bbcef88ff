"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes use
providers from metasearch.api.v1.dependencies (no manual resolver construction).
"""

from fastapi import APIRouter

from metasearch.api.v1.endpoints import health, ml_model_groups, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(
    ml_model_groups.router, prefix="/ml-model-groups", tags=["ml-model-groups"]
)
