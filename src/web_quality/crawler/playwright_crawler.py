"""Playwright-based page loader.

Renders the page in headless Chromium so the snapshot reflects the live DOM,
including the intrinsic size of every image once loaded.
"""

import logging
from typing import Optional

from ..config import CRAWLER_TIMEOUT, CRAWLER_USER_AGENT
from ..dom import IMAGE_INDEX_ATTRIBUTE, DocumentSnapshot

logger = logging.getLogger(__name__)

IMAGE_SIZES_SCRIPT = f"""
() => Array.from(document.querySelectorAll('img')).map((img, index) => {{
    img.setAttribute('{IMAGE_INDEX_ATTRIBUTE}', String(index));
    return [img.naturalWidth || 0, img.naturalHeight || 0];
}})
"""


class PageLoadError(Exception):
    """Raised when a page cannot be fetched for analysis."""
    pass


class CrawlResult:
    """Result of loading a single page."""

    def __init__(
        self,
        url: str,
        status_code: int,
        html: str = "",
        error: Optional[str] = None,
        final_url: Optional[str] = None,
        image_sizes: Optional[list[tuple[int, int]]] = None,
        rendered: bool = False,
    ):
        self.url = url  # Original requested URL
        self.final_url = final_url or url  # URL after redirects
        self.status_code = status_code
        self.html = html
        self.error = error
        self.image_sizes = image_sizes or []
        self.rendered = rendered  # Serialized from a browser with scripting on

    @property
    def ok(self) -> bool:
        return self.error is None and 200 <= self.status_code < 300

    def to_snapshot(self) -> DocumentSnapshot:
        """Build the analysis snapshot located at the final URL."""
        return DocumentSnapshot.from_html(
            self.html,
            url=self.final_url,
            image_sizes=self.image_sizes,
            rendered=self.rendered,
        )


class PlaywrightCrawler:
    """Headless Chromium loader for JavaScript-rendered pages."""

    def __init__(
        self,
        timeout: int = CRAWLER_TIMEOUT,
        headless: bool = True,
        user_agent: str = CRAWLER_USER_AGENT,
    ):
        """Initialize the crawler.

        Args:
            timeout: Page load timeout (seconds)
            headless: Run browser in headless mode
            user_agent: User-Agent header sent with every request
        """
        self.timeout = timeout * 1000  # Convert to ms
        self.headless = headless
        self.user_agent = user_agent

        self._browser = None
        self._context = None
        self._playwright = None

    async def _init_browser(self):
        """Initialize Playwright browser."""
        from playwright.async_api import async_playwright

        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self.headless,
            args=["--disable-dev-shm-usage", "--no-sandbox"],
        )
        self._context = await self._browser.new_context(
            viewport={"width": 1920, "height": 1080},
            user_agent=self.user_agent,
            locale="en-US",
        )

    async def _close_browser(self):
        """Close browser and cleanup."""
        if self._context:
            await self._context.close()
        if self._browser:
            await self._browser.close()
        if self._playwright:
            await self._playwright.stop()

    async def _load_page(self, url: str) -> CrawlResult:
        page = await self._context.new_page()

        try:
            # Wait for the load event so images report their natural size.
            response = await page.goto(url, timeout=self.timeout, wait_until="load")

            # Stamp image indices before serializing so sizes survive re-parsing.
            sizes = await page.evaluate(IMAGE_SIZES_SCRIPT)
            html = await page.content()

            return CrawlResult(
                url=url,
                status_code=response.status if response else 0,
                html=html,
                final_url=page.url,
                image_sizes=[(int(w), int(h)) for w, h in sizes],
                rendered=True,
            )
        except Exception as e:
            logger.error(f"Error loading {url}: {e}")
            return CrawlResult(url=url, status_code=0, error=str(e))
        finally:
            if not page.is_closed():
                await page.close()

    async def fetch(self, url: str) -> CrawlResult:
        """Load a single URL in a fresh browser and return its rendered HTML."""
        await self._init_browser()
        try:
            return await self._load_page(url)
        finally:
            await self._close_browser()
