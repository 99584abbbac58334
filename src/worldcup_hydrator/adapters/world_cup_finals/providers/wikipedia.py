"""
Wikipedia Page Provider

Fetches the List of FIFA World Cup finals page with a plain ``requests``
session. The fetch is attempted once; any network error or non-2xx status
aborts the run.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import requests

from worldcup_types.schemas.config import DEFAULT_SOURCE_URL, DEFAULT_USER_AGENT

from .base import PageProvider, ProviderError

logger = logging.getLogger(__name__)


class WikipediaProvider(PageProvider):
    """Provider that downloads the finals page from Wikipedia."""

    def __init__(
        self,
        url: str = DEFAULT_SOURCE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the provider.

        Args:
            url: Page to fetch
            user_agent: Value of the User-Agent header
            timeout: Request timeout in seconds, ``None`` to wait indefinitely
            session: Pre-built session (tests inject one); a new session is
                created and closed per fetch otherwise
        """
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout
        self._session = session

    @property
    def name(self) -> str:
        return "wikipedia"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }

    def _get(self, session: requests.Session) -> requests.Response:
        logger.debug(f"Making request to: {self.url}")
        response = session.get(self.url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response

    def fetch_raw(self) -> Mapping[str, Any]:
        """
        Fetch the page HTML.

        Returns:
            Dictionary with ``content``, ``url`` (final URL after redirects)
            and ``status_code``

        Raises:
            ProviderError: On any network, DNS or HTTP error
        """
        logger.info(f"Fetching FIFA World Cup finals data from {self.url}")
        try:
            if self._session is not None:
                response = self._get(self._session)
            else:
                with requests.Session() as session:
                    response = self._get(session)
        except requests.RequestException as e:
            logger.error(f"Request failed for {self.url}: {e}")
            raise ProviderError(self.name, self.url, str(e)) from e

        logger.debug(f"Fetched {len(response.content)} bytes from {response.url}")
        return {
            "content": response.text,
            "url": response.url,
            "status_code": response.status_code,
        }


class StaticPageProvider(PageProvider):
    """Provider that reads a saved copy of the page from disk."""

    def __init__(self, path: Path, url: Optional[str] = None):
        self.path = Path(path)
        self.url = url or self.path.resolve().as_uri()

    @property
    def name(self) -> str:
        return "static"

    def fetch_raw(self) -> Mapping[str, Any]:
        logger.info(f"Reading finals page from {self.path}")
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProviderError(self.name, str(self.path), str(e)) from e
        return {"content": content, "url": self.url, "status_code": None}
