"""Application DTOs (plain dataclasses; no HTTP or framework types)."""
