"""Git helpers for acquiring component sources."""

from .fetch import FetchError, SourceFetcher

__all__ = ["FetchError", "SourceFetcher"]
