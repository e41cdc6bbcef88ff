"""ML model group entity type: batch load, search, autocomplete, browse, browse paths.

All operations are synchronous request/response adapters over the entity
client: no retries, no caching, no merging of partial results.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

from metasearch.application.dtos.ml_model_group import EntityLoadResult, MLModelGroup
from metasearch.application.dtos.search import (
    AutoCompleteResults,
    BrowsePath,
    BrowseResults,
    FacetFilterInput,
    SearchResults,
)
from metasearch.application.mappers.ml_model_group import (
    extract_aspects,
    map_ml_model_group_snapshot,
)
from metasearch.application.mappers.search_results import (
    map_auto_complete_results,
    map_browse_paths,
    map_browse_results,
    map_urn_search_results,
)
from metasearch.application.services.resolver_utils import (
    build_browse_path,
    build_facet_filters,
)
from metasearch.core.constants import BROWSE_PATH_DELIMITER, DEFAULT_COUNT, DEFAULT_START
from metasearch.domain.enums import EntityType
from metasearch.domain.exceptions import ResolverException, ValidationException
from metasearch.domain.value_objects.urn import MLModelGroupUrn
from metasearch.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from metasearch.application.interfaces.entity_client import IEntityClient
    from metasearch.shared.context import QueryContext

logger = logging.getLogger(__name__)

ML_MODEL_GROUP_ENTITY_NAME = "mlModelGroup"
ML_MODEL_GROUP_FACET_FIELDS = frozenset({"origin", "platform"})


def parse_ml_model_group_urn(urn: str) -> MLModelGroupUrn | None:
    """Parse urn as an ML model group URN; None if it is not one."""
    try:
        return MLModelGroupUrn.from_string(urn)
    except ValueError:
        logger.debug("Ignoring invalid ML model group URN: %s", urn)
        return None


class MLModelGroupType:
    """Searchable, browsable, loadable entity type for ML model groups."""

    def __init__(
        self,
        entity_client: IEntityClient,
        entity_name: str = ML_MODEL_GROUP_ENTITY_NAME,
        facet_fields: Collection[str] = ML_MODEL_GROUP_FACET_FIELDS,
        browse_path_delimiter: str = BROWSE_PATH_DELIMITER,
        default_start: int = DEFAULT_START,
        default_count: int = DEFAULT_COUNT,
    ) -> None:
        self.entity_client = entity_client
        self.entity_name = entity_name
        self.facet_fields = frozenset(facet_fields)
        self.browse_path_delimiter = browse_path_delimiter
        self.default_start = default_start
        self.default_count = default_count

    def type(self) -> EntityType:
        return EntityType.MLMODEL_GROUP

    @traced("entity_type.ml_model_group.batch_load")
    def batch_load(
        self, urns: list[str], context: QueryContext
    ) -> list[EntityLoadResult[MLModelGroup] | None]:
        """Load groups in input order with one downstream batch call.

        Invalid URNs and URNs the service does not return yield None at their
        position; the output always has len(urns) entries.

        Raises:
            ResolverException: If the batch call or mapping fails.
        """
        keys = [parse_ml_model_group_urn(u) for u in urns]
        key_strings = [str(k) if k is not None else None for k in keys]
        try:
            entities = self.entity_client.batch_get(
                {k for k in key_strings if k is not None}, context.actor
            )
            results: list[EntityLoadResult[MLModelGroup] | None] = []
            for key in key_strings:
                snapshot = entities.get(key) if key is not None else None
                if snapshot is None:
                    results.append(None)
                    continue
                results.append(
                    EntityLoadResult(
                        data=map_ml_model_group_snapshot(snapshot),
                        local_context=extract_aspects(snapshot),
                    )
                )
            return results
        except Exception as e:
            logger.error("Failed to batch load MLModelGroups: %s", urns, exc_info=True)
            raise ResolverException(
                "Failed to batch load MLModelGroups", details={"urns": urns}
            ) from e

    @traced("entity_type.ml_model_group.search")
    def search(
        self,
        query: str,
        filters: list[FacetFilterInput] | None,
        start: int | None,
        count: int | None,
        context: QueryContext,
    ) -> SearchResults:
        facet_filters = build_facet_filters(filters, self.facet_fields)
        start, count = self._page(start, count)
        try:
            result = self.entity_client.search(
                self.entity_name, query, facet_filters, start, count, context.actor
            )
            return map_urn_search_results(result)
        except Exception as e:
            raise self._wrap(
                "search",
                e,
                query=query,
                filters=facet_filters,
                start=start,
                count=count,
            ) from e

    @traced("entity_type.ml_model_group.auto_complete")
    def auto_complete(
        self,
        query: str,
        field: str | None,
        filters: list[FacetFilterInput] | None,
        limit: int,
        context: QueryContext,
    ) -> AutoCompleteResults:
        facet_filters = build_facet_filters(filters, self.facet_fields)
        try:
            result = self.entity_client.auto_complete(
                self.entity_name,
                query,
                facet_filters,
                limit,
                context.actor,
                field=field,
            )
            return map_auto_complete_results(result)
        except Exception as e:
            raise self._wrap(
                "autocomplete",
                e,
                query=query,
                field=field,
                filters=facet_filters,
                limit=limit,
            ) from e

    @traced("entity_type.ml_model_group.browse")
    def browse(
        self,
        path: list[str],
        filters: list[FacetFilterInput] | None,
        start: int | None,
        count: int | None,
        context: QueryContext,
    ) -> BrowseResults:
        facet_filters = build_facet_filters(filters, self.facet_fields)
        path_str = build_browse_path(path, self.browse_path_delimiter)
        start, count = self._page(start, count)
        try:
            result = self.entity_client.browse(
                self.entity_name, path_str, facet_filters, start, count, context.actor
            )
            return map_browse_results(result, self.browse_path_delimiter)
        except Exception as e:
            raise self._wrap(
                "browse",
                e,
                path=path_str,
                filters=facet_filters,
                start=start,
                count=count,
            ) from e

    @traced("entity_type.ml_model_group.browse_paths")
    def browse_paths(self, urn: str, context: QueryContext) -> list[BrowsePath]:
        """Browse locations of one group.

        Raises:
            ValidationException: If urn is not a valid ML model group URN.
            ResolverException: If the downstream call fails.
        """
        key = parse_ml_model_group_urn(urn)
        if key is None:
            raise ValidationException(f"Invalid ML model group URN: {urn}", field="urn")
        try:
            paths = self.entity_client.get_browse_paths(str(key), context.actor)
            return map_browse_paths(paths, self.browse_path_delimiter)
        except Exception as e:
            raise self._wrap("browse paths lookup", e, urn=urn) from e

    def _page(self, start: int | None, count: int | None) -> tuple[int, int]:
        """Fill omitted pagination values from the configured defaults."""
        return (
            self.default_start if start is None else start,
            self.default_count if count is None else count,
        )

    def _wrap(self, operation: str, error: Exception, **params: object) -> ResolverException:
        summary = ", ".join(f"{k}: {v}" for k, v in params.items())
        logger.error(
            "Failed to execute %s for %s: %s", operation, self.entity_name, summary,
            exc_info=error,
        )
        return ResolverException(
            f"Failed to execute {operation} for {self.entity_name}: {summary}",
            details={"entity": self.entity_name, **params},
        )
