"""Request context management using contextvars.

The request ID middleware stores the current request ID here so that log
records and resolver errors can reference it. QueryContext is the
per-request value handed to resolvers (actor plus request ID).

Usage:
    set_request_id("4f1c...")
    context = QueryContext(actor="urn:li:corpuser:jdoe", request_id=get_request_id())
"""

from contextvars import ContextVar
from dataclasses import dataclass

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


@dataclass(frozen=True)
class QueryContext:
    """Immutable per-request context passed to resolvers.

    Attributes:
        actor: URN of the authenticated caller, forwarded downstream.
        request_id: Request ID of the HTTP request, if any.
    """

    actor: str
    request_id: str | None = None


def set_request_id(request_id: str | None) -> None:
    """Set the request ID for the current async task/thread."""
    _current_request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _current_request_id.get()
