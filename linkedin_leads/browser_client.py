"""
Browser Client - Playwright browser automation used by the search scraper.
"""
import logging
from typing import Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page

from linkedin_leads import config

logger = logging.getLogger(__name__)

# HTTP error messages mapping
HTTP_ERROR_MESSAGES = {
    403: " - Access forbidden (may be rate limited or blocked)",
    429: " - Rate limited (too many requests)",
    500: " - Server error",
    503: " - Service unavailable",
}


class NavigationError(Exception):
    """Raised when a page answers with an HTTP error status."""

    def __init__(self, url: str, status: int):
        message = f"HTTP {status} error when accessing {url}"
        super().__init__(message + HTTP_ERROR_MESSAGES.get(status, ""))
        self.url = url
        self.status = status


class BrowserClient:
    """Owns the Playwright browser, context and the active tab."""

    def __init__(self):
        self.playwright = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    async def _safe_close(self, resource, close_method):
        """Close a resource, logging (not raising) any failure."""
        if resource and close_method:
            try:
                await close_method()
            except Exception as e:
                logger.debug(f"Error closing {resource!r}: {e}")

    async def setup_browser(self):
        """Launch the browser and open a context."""
        if self.browser and self.browser.is_connected():
            return

        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(
            headless=config.BROWSER_HEADLESS,
            args=[
                "--disable-blink-features=AutomationControlled",
                "--disable-dev-shm-usage",
            ],
        )
        self.context = await self.browser.new_context(
            viewport={
                "width": config.BROWSER_VIEWPORT_WIDTH,
                "height": config.BROWSER_VIEWPORT_HEIGHT,
            },
            user_agent=config.USER_AGENT,
            locale=config.BROWSER_LOCALE,
        )

    async def new_tab(self, url: str) -> Page:
        """Open a new tab, make it the active page and load url in it."""
        self.page = await self.context.new_page()
        await self.navigate_to(url)
        return self.page

    async def navigate_to(self, url: str):
        """Navigate the active page to a URL. Raises NavigationError on HTTP errors."""
        response = await self.page.goto(
            url, wait_until="domcontentloaded", timeout=config.NAVIGATION_TIMEOUT
        )
        if response and response.status >= 400:
            raise NavigationError(url, response.status)

    async def wait_for_navigation(self):
        """Wait for the active page to finish loading after a click."""
        await self.page.wait_for_load_state("domcontentloaded", timeout=config.NAVIGATION_TIMEOUT)

    async def close(self):
        """Close browser and cleanup resources."""
        if self.browser:
            await self._safe_close(self.browser, self.browser.close)
        self.browser = None
        if self.playwright:
            await self._safe_close(self.playwright, self.playwright.stop)
        self.playwright = None
        self.context = None
        self.page = None
