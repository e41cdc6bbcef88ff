"""Rate limiter instance for SlowAPI.

Shared so main (app.state.limiter) and route modules use the same instance
without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from metasearch.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _search_limit() -> str:
    """Read per call so tests can change SEARCH_RATE_LIMIT via get_settings.cache_clear()."""
    return get_settings().search_rate_limit


limit_search = limiter.limit(_search_limit)
