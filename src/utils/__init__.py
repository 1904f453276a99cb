"""Utility modules for the Citation Readiness Engine."""

from .config import Settings, get_settings
from .fetch import DocumentFetcher, DocumentFetchError, RetryConfig

__all__ = [
    "Settings",
    "get_settings",
    # Remote document fetching
    "DocumentFetcher",
    "DocumentFetchError",
    "RetryConfig",
]
