"""Application layer: resolvers, DTOs, mappers, and interfaces (ports)."""
