"""Application lifespan: startup and shutdown.

Creates the shared entity service client and the search worker pool on
startup and releases them on shutdown. Dependencies read both from
app.state.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from metasearch.core.config import get_settings
from metasearch.infrastructure.entity_client import RestEntityClient
from metasearch.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), entity service HTTP
    client, search worker pool. Shutdown releases them in reverse.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.telemetry_enabled:
        from metasearch.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_httpx()
        logger.info("Telemetry initialized")

    http_client = httpx.Client(
        base_url=settings.entity_service_url,
        timeout=settings.entity_service_timeout_seconds,
    )
    app.state.entity_http_client = http_client
    app.state.entity_client = RestEntityClient(
        http_client, actor_header=settings.entity_service_actor_header
    )
    app.state.search_executor = ThreadPoolExecutor(
        max_workers=settings.search_worker_pool_size,
        thread_name_prefix="search-worker",
    )
    logger.info(
        "Entity service client ready: %s (search workers: %s)",
        settings.entity_service_url,
        settings.search_worker_pool_size,
    )

    yield

    # ---- Shutdown ----
    app.state.search_executor.shutdown(wait=True, cancel_futures=True)
    logger.info("Search worker pool stopped")

    app.state.entity_http_client.close()
    logger.info("Entity service client closed")

    from metasearch.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
