import sys
import asyncio
import argparse

# --- Settings/Logging ---
from matchfeed.logging.setup import setup_logging
from matchfeed.config.settings import settings

setup_logging()

from loguru import logger

from matchfeed.extraction.extractor import ExtractionError
from matchfeed.query.processor import MatchQuery
from matchfeed.scrapers.base_scraper import ScraperError
from matchfeed.scrapers.source_scraper import SourceScraper
from matchfeed.services.match_service import MatchService, ProcessingError

from rich import print
from rich.console import Console
from rich.panel import Panel


async def fetch_once(query: MatchQuery, hot_only: bool) -> bool:
    """Runs the pipeline a single time and prints the resulting page."""
    scraper = SourceScraper()
    try:
        page = await MatchService(scraper).get_matches(query, hot_only=hot_only)
    except (ScraperError, ExtractionError, ProcessingError) as e:
        logger.error(f"Fetch failed: {e}")
        return False
    finally:
        await scraper.close()

    Console().print_json(page.model_dump_json(by_alias=True))
    return True


def serve() -> None:
    """Starts the HTTP API."""
    import uvicorn

    from matchfeed.api.main import app

    print(
        Panel(
            f"[bold]{settings.app_name}[/bold] v{settings.app_version}\n"
            f"Listening on http://{settings.host}:{settings.port}\n"
            f"Sources: {', '.join(settings.source_domains)}",
            title="Match Feed",
        )
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # Keep the Loguru interception from setup_logging
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Live match feed API.")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="Run the HTTP API (default).")

    fetch = sub.add_parser("fetch", help="Fetch one page of matches and print it.")
    fetch.add_argument("--hot", action="store_true", help="Only hot matches.")
    fetch.add_argument("--status", help="Status label filter, e.g. Live.")
    fetch.add_argument("--league", help="Competition substring filter.")
    fetch.add_argument("--page", default=None, help="Page number (default 1).")
    fetch.add_argument("--limit", default=None, help="Items per page (default 10).")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "fetch":
        query = MatchQuery.from_params(
            status=args.status, league=args.league, page=args.page, limit=args.limit
        )
        ok = asyncio.run(fetch_once(query, hot_only=args.hot))
        return 0 if ok else 1

    serve()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
