from typing import List, Optional

import httpx
from loguru import logger

from matchfeed.config.settings import settings
from matchfeed.models.match import FetchedPage
from .base_scraper import BaseScraper, SourceExhaustedError


def _describe_error(error: Exception) -> str:
    if isinstance(error, httpx.HTTPStatusError):
        return f"HTTP {error.response.status_code}"
    if isinstance(error, httpx.TimeoutException):
        return f"timeout after {settings.request_timeout}s"
    return str(error) or type(error).__name__


class SourceScraper(BaseScraper):
    """Fetches the listing page from an ordered list of mirror domains.

    Domains are tried one after another; later entries are fallbacks, so the
    attempts are never run concurrently. The first successful response wins.
    """

    def __init__(
        self,
        source_domains: Optional[List[str]] = None,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.source_domains = list(
            settings.source_domains if source_domains is None else source_domains
        )

    async def fetch_page(self) -> FetchedPage:
        last_error: Optional[Exception] = None

        for domain in self.source_domains:
            logger.info(f"Trying to fetch from: {domain}")
            try:
                response = await self._make_request("GET", domain)
            except (httpx.RequestError, httpx.HTTPStatusError) as e:
                logger.warning(f"Failed to fetch from {domain}: {_describe_error(e)}")
                last_error = e
                continue

            logger.info(f"Successfully fetched from: {domain}")
            return FetchedPage(html=response.text, base_url=domain)

        if last_error is None:
            logger.error("No source domains configured.")
            raise SourceExhaustedError("All source domains failed. No domains configured.")

        logger.error(f"All {len(self.source_domains)} source domains failed.")
        raise SourceExhaustedError(
            f"All source domains failed. Last error: {_describe_error(last_error)}"
        ) from last_error
