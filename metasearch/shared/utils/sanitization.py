"""Query string sanitization for the downstream search syntax."""

# Forward slash is reserved by the search backend's query syntax.
_FORWARD_SLASH = "/"
_ESCAPED_FORWARD_SLASH = "\\\\/"


def is_blank(value: str | None) -> bool:
    """Return True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def escape_forward_slash(query: str) -> str:
    """Escape every forward slash in query; all other characters are kept as-is.

    Args:
        query: Raw free-text query.

    Returns:
        Query with each '/' replaced by '\\\\/'.
    """
    if _FORWARD_SLASH in query:
        return query.replace(_FORWARD_SLASH, _ESCAPED_FORWARD_SLASH)
    return query
