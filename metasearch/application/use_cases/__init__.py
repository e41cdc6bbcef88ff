"""Application use cases: resolvers and entity types."""

from metasearch.application.use_cases.ml_model_group import MLModelGroupType
from metasearch.application.use_cases.search_across_entities import (
    SearchAcrossEntitiesResolver,
)

__all__ = ["MLModelGroupType", "SearchAcrossEntitiesResolver"]
