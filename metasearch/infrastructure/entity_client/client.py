"""Blocking REST client for the entity service (rest.li style action API).

Every operation is ``POST {base_url}/entities?action=<name>`` with a JSON
body; responses are wrapped in ``{"value": ...}``. The caller's actor is sent
in a header. Timeouts and connection pooling belong to the httpx.Client
passed in.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from metasearch.application.dtos.entity_service import (
    AutoCompleteResult,
    BrowseResult,
    EntitySnapshot,
    Filter,
    SearchResult,
)
from metasearch.domain.exceptions import EntityClientException
from metasearch.infrastructure.entity_client._encoding import (
    decode_auto_complete_result,
    decode_batch_get,
    decode_browse_result,
    decode_search_result,
    encode_facet_filters,
    encode_filter,
)

logger = logging.getLogger(__name__)

_ENTITIES_RESOURCE = "/entities"
_RESTLI_PROTOCOL_HEADER = {"X-RestLi-Protocol-Version": "2.0.0"}


class RestEntityClient:
    """IEntityClient over httpx. Thread-safe as long as the httpx.Client is."""

    def __init__(
        self,
        http: httpx.Client,
        actor_header: str = "X-DataHub-Actor",
    ) -> None:
        self._http = http
        self._actor_header = actor_header

    def _action(self, action: str, body: dict[str, Any], actor: str) -> Any:
        """POST an action and return the unwrapped 'value'."""
        headers = {**_RESTLI_PROTOCOL_HEADER, self._actor_header: actor}
        payload = {k: v for k, v in body.items() if v is not None}
        try:
            resp = self._http.post(
                _ENTITIES_RESOURCE,
                params={"action": action},
                json=payload,
                headers=headers,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise EntityClientException(
                action, e.response.text or str(e), e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            raise EntityClientException(action, str(e)) from e
        try:
            return resp.json()["value"]
        except (ValueError, KeyError, TypeError) as e:
            raise EntityClientException(action, "malformed response body") from e

    def _decode(self, action: str, decoder: Any, raw: Any) -> Any:
        try:
            return decoder(raw)
        except (KeyError, TypeError, ValueError) as e:
            raise EntityClientException(action, f"unexpected response shape: {e}") from e

    def search_across_entities(
        self,
        entities: list[str],
        query: str,
        filter: Filter | None,
        start: int,
        count: int,
        actor: str,
    ) -> SearchResult:
        raw = self._action(
            "searchAcrossEntities",
            {
                "entities": entities,
                "input": query,
                "filter": encode_filter(filter),
                "start": start,
                "count": count,
            },
            actor,
        )
        return self._decode("searchAcrossEntities", decode_search_result, raw)

    def search(
        self,
        entity: str,
        query: str,
        facet_filters: dict[str, str],
        start: int,
        count: int,
        actor: str,
    ) -> SearchResult:
        raw = self._action(
            "search",
            {
                "entity": entity,
                "input": query,
                "filter": encode_facet_filters(facet_filters),
                "start": start,
                "count": count,
            },
            actor,
        )
        return self._decode("search", decode_search_result, raw)

    def auto_complete(
        self,
        entity: str,
        query: str,
        facet_filters: dict[str, str],
        limit: int,
        actor: str,
        field: str | None = None,
    ) -> AutoCompleteResult:
        raw = self._action(
            "autocomplete",
            {
                "entity": entity,
                "query": query,
                "field": field,
                "filter": encode_facet_filters(facet_filters),
                "limit": limit,
            },
            actor,
        )
        return self._decode("autocomplete", decode_auto_complete_result, raw)

    def browse(
        self,
        entity: str,
        path: str,
        facet_filters: dict[str, str],
        start: int,
        count: int,
        actor: str,
    ) -> BrowseResult:
        raw = self._action(
            "browse",
            {
                "entity": entity,
                "path": path,
                "filter": encode_facet_filters(facet_filters),
                "start": start,
                "limit": count,
            },
            actor,
        )
        return self._decode("browse", decode_browse_result, raw)

    def batch_get(self, urns: set[str], actor: str) -> dict[str, EntitySnapshot]:
        if not urns:
            return {}
        raw = self._action("batchGet", {"urns": sorted(urns)}, actor)
        return self._decode("batchGet", decode_batch_get, raw)

    def get_browse_paths(self, urn: str, actor: str) -> list[str]:
        raw = self._action("getBrowsePaths", {"urn": urn}, actor)
        if not isinstance(raw, list):
            raise EntityClientException("getBrowsePaths", "expected a list of paths")
        return [str(p) for p in raw]
