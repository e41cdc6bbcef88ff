"""Security: bearer token verification."""

from metasearch.infrastructure.security.jwt import (
    actor_from_payload,
    create_access_token,
    verify_token,
)

__all__ = ["actor_from_payload", "create_access_token", "verify_token"]
