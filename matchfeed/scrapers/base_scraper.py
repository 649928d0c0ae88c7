from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from matchfeed.config.settings import settings
from matchfeed.models.match import FetchedPage


class ScraperError(Exception):
    """Custom exception for scraper-related errors."""

    pass


class SourceExhaustedError(ScraperError):
    """Raised when every candidate source failed within one pass."""

    pass


class BaseScraper(ABC):
    """Abstract base class for page scrapers."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        )

    @abstractmethod
    async def fetch_page(self) -> FetchedPage:
        """Fetch the listing page.

        Returns:
            The HTML body together with the base URL that served it.
        """
        pass

    async def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes a single asynchronous HTTP request.

        Network errors and timeouts surface as ``httpx.RequestError``; non-2xx
        responses as ``httpx.HTTPStatusError``. There is no retry here.
        """
        logger.debug(f"Making request: {method} {url}")
        response = await self.client.request(
            method, url, headers=headers, params=params, **kwargs
        )
        response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
        logger.debug(f"Request successful: {response.status_code} for {url}")
        return response

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.debug(f"Closed HTTP client for {type(self).__name__}")
