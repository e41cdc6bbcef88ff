"""Application interfaces (ports): entity service client and entity types."""

from metasearch.application.interfaces.entity_client import IEntityClient
from metasearch.application.interfaces.entity_types import (
    BrowsableEntityType,
    LoadableEntityType,
    SearchableEntityType,
)

__all__ = [
    "BrowsableEntityType",
    "IEntityClient",
    "LoadableEntityType",
    "SearchableEntityType",
]
