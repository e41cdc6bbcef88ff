"""Infrastructure layer: adapters to external systems (entity service)."""
