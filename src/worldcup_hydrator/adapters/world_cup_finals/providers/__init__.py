"""
Finals Page Providers

This package contains data providers for fetching the finals page.
"""

from .base import PageProvider, ProviderError
from .wikipedia import StaticPageProvider, WikipediaProvider

__all__ = [
    "PageProvider",
    "ProviderError",
    "WikipediaProvider",
    "StaticPageProvider",
]
