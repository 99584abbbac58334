"""
Base Page Provider Interface

This module defines the protocol/interface for page providers.
Providers are responsible for fetching raw page content from external sources.
"""

from abc import abstractmethod
from typing import Any, Mapping, Protocol

from ....errors import HydratorError


class PageProvider(Protocol):
    """
    Protocol for page providers.

    Providers fetch the raw HTML of the finals page and return it together
    with the URL it came from.
    """

    @abstractmethod
    def fetch_raw(self) -> Mapping[str, Any]:
        """
        Fetch raw page data.

        Returns:
            Mapping with at least ``content`` (HTML string) and ``url``

        Raises:
            ProviderError: If the provider fails to fetch data
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging and identification."""
        pass


class ProviderError(HydratorError):
    """Base exception for provider-related errors."""

    def __init__(self, provider_name: str, url: str, message: str):
        self.provider_name = provider_name
        self.url = url
        self.message = message
        super().__init__(f"{provider_name} failed for {url}: {message}")
