"""Domain layer: enums, value objects, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from metasearch.domain.enums import EntityType, FabricType, OwnershipType
from metasearch.domain.exceptions import (
    AuthenticationException,
    EntityClientException,
    MetaSearchException,
    ResolverException,
    ValidationException,
)
from metasearch.domain.value_objects import DataPlatformUrn, MLModelGroupUrn, Urn

__all__ = [
    # Enums
    "EntityType",
    "FabricType",
    "OwnershipType",
    # Exceptions
    "AuthenticationException",
    "EntityClientException",
    "MetaSearchException",
    "ResolverException",
    "ValidationException",
    # Value objects
    "DataPlatformUrn",
    "MLModelGroupUrn",
    "Urn",
]
