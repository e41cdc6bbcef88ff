"""Mappers from entity service DTOs to application read-models."""

from metasearch.application.mappers.ml_model_group import (
    extract_aspects,
    map_ml_model_group_snapshot,
)
from metasearch.application.mappers.search_results import (
    map_auto_complete_results,
    map_browse_paths,
    map_browse_results,
    map_urn_search_results,
    map_urn_to_entity,
)

__all__ = [
    "extract_aspects",
    "map_auto_complete_results",
    "map_browse_paths",
    "map_browse_results",
    "map_ml_model_group_snapshot",
    "map_urn_search_results",
    "map_urn_to_entity",
]
