"""Shared utilities."""

from metasearch.shared.utils.sanitization import escape_forward_slash, is_blank

__all__ = ["escape_forward_slash", "is_blank"]
