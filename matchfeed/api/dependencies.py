"""FastAPI dependencies: one scraper (and HTTP client) per request."""
from typing import AsyncIterator

from fastapi import Depends

from matchfeed.config.settings import AppSettings, settings
from matchfeed.scrapers.source_scraper import SourceScraper
from matchfeed.services.match_service import MatchService


def get_app_settings() -> AppSettings:
    return settings


async def get_source_scraper(
    app_settings: AppSettings = Depends(get_app_settings),
) -> AsyncIterator[SourceScraper]:
    scraper = SourceScraper(source_domains=app_settings.source_domains)
    try:
        yield scraper
    finally:
        await scraper.close()


def get_match_service(
    scraper: SourceScraper = Depends(get_source_scraper),
) -> MatchService:
    return MatchService(scraper)
