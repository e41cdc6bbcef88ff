"""metasearch: metadata-catalog search gateway over an entity service."""
