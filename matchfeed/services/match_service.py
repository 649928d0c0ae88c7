from typing import Optional

from loguru import logger

from matchfeed.extraction.extractor import ExtractionError, extract_matches
from matchfeed.models.match import MatchPage
from matchfeed.normalization.normalizer import Normalizer
from matchfeed.query.processor import MatchQuery, filter_matches, paginate
from matchfeed.scrapers.base_scraper import BaseScraper, ScraperError


class ProcessingError(Exception):
    """Wraps unexpected failures while building a match page."""

    pass


class MatchService:
    """Runs the fetch -> extract -> normalize -> filter -> paginate pipeline.

    Nothing is cached: every call fetches the page again.
    """

    def __init__(self, scraper: BaseScraper, normalizer: Optional[Normalizer] = None):
        self._scraper = scraper
        self._normalizer = normalizer or Normalizer()

    async def get_matches(self, query: MatchQuery, hot_only: bool = False) -> MatchPage:
        try:
            page = await self._scraper.fetch_page()
            raw_matches = extract_matches(page.html)
            matches = self._normalizer.normalize(raw_matches, page.base_url)
            filtered = filter_matches(matches, query, hot_only=hot_only)
            result = paginate(filtered, query, source_domain=page.base_url)
        except (ScraperError, ExtractionError):
            raise
        except Exception as e:
            logger.exception(f"Unexpected error while building match page: {e}")
            raise ProcessingError(str(e) or type(e).__name__) from e

        logger.info(
            f"Serving page {result.current_page}/{result.total_pages} "
            f"({len(result.data)} of {result.total_items} matches, hot_only={hot_only}) "
            f"from {result.source_domain}"
        )
        return result
