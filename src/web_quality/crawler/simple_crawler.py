"""Simple requests-based page loader.

Faster than Playwright but doesn't handle JavaScript-rendered content, and
cannot measure image sizes (every image reports 0x0).
"""

import logging
import requests

from ..config import CRAWLER_TIMEOUT, CRAWLER_USER_AGENT
from .playwright_crawler import CrawlResult

logger = logging.getLogger(__name__)


class SimpleCrawler:
    """Fetches the static HTML of a page."""

    def __init__(self, timeout: int = CRAWLER_TIMEOUT, user_agent: str = CRAWLER_USER_AGENT):
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        })

    def fetch(self, url: str) -> CrawlResult:
        """Fetch a single page."""
        try:
            response = self.session.get(url, timeout=self.timeout)

            return CrawlResult(
                url=url,
                status_code=response.status_code,
                html=response.text,
                final_url=response.url,
            )
        except requests.RequestException as e:
            logger.error(f"Error fetching {url}: {e}")
            return CrawlResult(
                url=url,
                status_code=0,
                error=str(e),
            )
