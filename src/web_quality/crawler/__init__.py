"""Page loaders that turn a URL into a document snapshot."""

import asyncio
from typing import Optional

from ..config import USE_PLAYWRIGHT
from ..dom import DocumentSnapshot
from .playwright_crawler import CrawlResult, PageLoadError, PlaywrightCrawler
from .simple_crawler import SimpleCrawler

__all__ = [
    "ANALYSIS_FAILED_MESSAGE",
    "CrawlResult",
    "PageLoadError",
    "PlaywrightCrawler",
    "SimpleCrawler",
    "load_snapshot",
]

ANALYSIS_FAILED_MESSAGE = "Could not analyze page. Make sure you're on a valid webpage."


def load_snapshot(url: str, live: Optional[bool] = None) -> DocumentSnapshot:
    """Fetch ``url`` and return its snapshot.

    Args:
        url: Page to load
        live: Render with Playwright; defaults to the WQA_USE_PLAYWRIGHT setting

    Raises:
        PageLoadError: The page could not be fetched or returned a non-2xx status
    """
    if live is None:
        live = USE_PLAYWRIGHT

    if live:
        result = asyncio.run(PlaywrightCrawler().fetch(url))
    else:
        result = SimpleCrawler().fetch(url)

    if not result.ok:
        raise PageLoadError(result.error or f"{url} returned HTTP {result.status_code}")
    return result.to_snapshot()
