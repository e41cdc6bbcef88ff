"""HTTP middleware applied in metasearch.main."""

from metasearch.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
