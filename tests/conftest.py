"""
Shared pytest fixtures.

1. Sample upstream records and HTML pages
2. httpx.MockTransport-backed scrapers (no real network)
3. FastAPI client wired to a fake upstream
"""
import json
from typing import AsyncGenerator, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from matchfeed.scrapers.source_scraper import SourceScraper

BASE_URL = "https://example.com/"
MIRROR_URL = "https://mirror.example.org/"


def make_raw_match(
    match_id: int = 1,
    status_id=1,
    hot: Optional[str] = "0",
    competition: str = "English Premier League",
    anchors: int = 2,
) -> Dict:
    return {
        "id": match_id,
        "status_id": status_id,
        "hot": hot,
        "time": 1700000000,
        "post_name": f"home-vs-away-{match_id}",
        "home_name": "Manchester United",
        "home_logo": "man_utd.png",
        "away_name": "Liverpool",
        "away_logo": "liverpool.png",
        "match_data": {
            "competition_full": competition,
            "anchors": [{"uid": 100 + i, "name": f"BLV {i}"} for i in range(anchors)],
        },
    }


def make_page(raw_matches: List[Dict]) -> str:
    payload = json.dumps(raw_matches)
    return (
        "<html><head><title>Live</title></head><body>"
        f'<script id="matches-data" type="application/json">{payload}</script>'
        "</body></html>"
    )


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def make_match() -> Callable[..., Dict]:
    return make_raw_match


@pytest.fixture
def make_html() -> Callable[[List[Dict]], str]:
    return make_page


@pytest.fixture
def raw_matches() -> List[Dict]:
    """A mix of live, upcoming and finished records, some hot."""
    return [
        make_raw_match(1, status_id=1, hot="1", competition="English Premier League"),
        make_raw_match(2, status_id=0, hot="0", competition="Spanish La Liga"),
        make_raw_match(3, status_id=4, hot="1", competition="Spanish Copa del Rey"),
        make_raw_match(4, status_id=8, hot="0", competition="English FA Cup"),
        make_raw_match(5, status_id=0, hot="1", competition="Italian Serie A"),
    ]


@pytest.fixture
def page_html(raw_matches) -> str:
    return make_page(raw_matches)


@pytest.fixture
def upstream() -> Dict[str, httpx.Response]:
    """URL -> canned response. Unlisted URLs raise a connection error."""
    return {}


@pytest.fixture
def requested_urls() -> List[str]:
    return []


@pytest.fixture
def scraper_factory(upstream, requested_urls) -> Callable[..., SourceScraper]:
    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        requested_urls.append(url)
        if url not in upstream:
            raise httpx.ConnectError("connection refused", request=request)
        return upstream[url]

    def factory(domains: Optional[List[str]] = None) -> SourceScraper:
        return SourceScraper(
            source_domains=[BASE_URL, MIRROR_URL] if domains is None else domains,
            client=mock_client(handler),
        )

    return factory


@pytest_asyncio.fixture
async def client(scraper_factory) -> AsyncGenerator[httpx.AsyncClient, None]:
    """API client whose scraper talks to the ``upstream`` fixture."""
    from matchfeed.api.dependencies import get_source_scraper
    from matchfeed.api.main import app

    async def override_scraper():
        scraper = scraper_factory()
        try:
            yield scraper
        finally:
            await scraper.close()

    app.dependency_overrides[get_source_scraper] = override_scraper
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
