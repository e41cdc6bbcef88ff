"""JWT verification for bearer authentication.

The token's ``sub`` claim identifies the actor. Uses metasearch.core.config
for secret and algorithm.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from metasearch.core.config import get_settings
from metasearch.core.constants import CORP_USER_URN_PREFIX

DEFAULT_TOKEN_TTL = timedelta(hours=8)


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed token for subject (used by tooling and tests).

    Args:
        subject: Actor URN or bare user name.
        expires_delta: Optional TTL; defaults to DEFAULT_TOKEN_TTL.
    """
    settings = get_settings()
    expire = datetime.now(UTC) + (expires_delta or DEFAULT_TOKEN_TTL)
    encoded = jwt.encode(
        {"sub": subject, "exp": expire},
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Raises:
        ValueError: If the token is invalid, expired, or missing exp/sub.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload


def actor_from_payload(payload: dict[str, Any]) -> str:
    """Actor URN from the sub claim; bare user names become corpuser URNs."""
    subject = str(payload["sub"])
    if subject.startswith("urn:li:"):
        return subject
    return f"{CORP_USER_URN_PREFIX}{subject}"
