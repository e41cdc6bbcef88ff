"""Domain value objects (immutable, self-validating)."""

from metasearch.domain.value_objects.urn import DataPlatformUrn, MLModelGroupUrn, Urn

__all__ = ["DataPlatformUrn", "MLModelGroupUrn", "Urn"]
