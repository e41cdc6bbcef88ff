"""Entity service client (httpx) and its wire encoding."""

from metasearch.infrastructure.entity_client.client import RestEntityClient

__all__ = ["RestEntityClient"]
