"""Core: config, constants, limiter, and application bootstrap.

Single place for settings and shared constants.
"""

from metasearch.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
