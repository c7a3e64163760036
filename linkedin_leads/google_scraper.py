"""
Google Scraper - collects LinkedIn profile links from Google search results,
page by page, into the persisted scrape state.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlencode

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from linkedin_leads import config, db
from linkedin_leads.browser_client import BrowserClient, NavigationError
from linkedin_leads.constants import ScrapeStateKey
from linkedin_leads.retry import retry_async
from linkedin_leads.spreadsheet import write_rows

logger = logging.getLogger(__name__)

Profile = dict[str, str]


def build_search_url(query: str) -> str:
    """Google search URL restricted to LinkedIn profile pages."""
    q = f"{config.SEARCH_SITE_FILTER} {query.strip()}".strip()
    return f"{config.GOOGLE_SEARCH_URL}?{urlencode({'q': q})}"


def merge_profiles(existing: list[Profile], found: list[Profile]) -> list[Profile]:
    """Append found profiles whose URL isn't already in existing, keeping order."""
    seen_urls = {p["url"] for p in existing}
    merged = list(existing)
    for profile in found:
        if profile["url"] not in seen_urls:
            seen_urls.add(profile["url"])
            merged.append(profile)
    return merged


def log_profile_count(changes: dict[str, tuple[Any, Any]]):
    """State listener reporting how many profiles have been collected."""
    if ScrapeStateKey.PROFILES in changes:
        _, profiles = changes[ScrapeStateKey.PROFILES]
        logger.info(f"Found {len(profiles or [])} profiles")


def get_profiles() -> list[Profile]:
    return db.get_state([ScrapeStateKey.PROFILES]).get(ScrapeStateKey.PROFILES, [])


def export_profiles_csv(output_csv: str | Path | None = None) -> Path | None:
    """Write the collected profiles to CSV (Name, URL). Returns None if there are none."""
    profiles = get_profiles()
    if not profiles:
        return None
    rows = [{"Name": p["name"], "URL": p["url"]} for p in profiles]
    return write_rows(rows, output_csv or config.PROFILES_CSV)


class GoogleSearchScraper:
    """Walks Google result pages and stores LinkedIn profile name/URL pairs."""

    def __init__(self, client: BrowserClient):
        """Initialize with a browser client."""
        self.client = client

    async def extract_profiles_from_page(self) -> list[Profile]:
        """Extract {name, url} for every result that has a title and a LinkedIn profile link."""
        page = self.client.page
        profiles = []

        try:
            await page.wait_for_selector(config.SEARCH_RESULT_SELECTOR, timeout=config.SELECTOR_TIMEOUT)
        except PlaywrightTimeoutError:
            logger.debug("Timeout waiting for search results")

        for result in await page.query_selector_all(config.SEARCH_RESULT_SELECTOR):
            title = await result.query_selector(config.RESULT_TITLE_SELECTOR)
            link = await result.query_selector(config.PROFILE_LINK_SELECTOR)
            if not title or not link:
                continue

            # Resolved href, not the raw attribute
            url = await link.evaluate("a => a.href")
            if not url or config.PROFILE_URL_MARKER not in url:
                continue
            name = ((await title.text_content()) or "").strip()
            profiles.append({"name": name, "url": url})

        return profiles

    async def scrape_current_page(self) -> list[Profile]:
        """Extract the current page and merge it into the stored profiles."""
        found = await self.extract_profiles_from_page()
        merged = merge_profiles(get_profiles(), found)
        db.set_state({ScrapeStateKey.PROFILES: merged})
        return merged

    def _stop(self, message: str):
        db.set_state({ScrapeStateKey.IS_SCRAPING_ACTIVE: False})
        logger.info(message)

    async def go_to_next_page(self, next_page: int) -> bool:
        """Click the "next" control if it is there and enabled. Returns True if clicked."""
        page = self.client.page
        next_button = page.locator(config.NEXT_BUTTON_SELECTOR).first
        try:
            available = await next_button.count() > 0 and await next_button.is_enabled()
        except PlaywrightTimeoutError:
            available = False

        if not available:
            self._stop("No more pages")
            return False

        db.set_state({ScrapeStateKey.CURRENT_PAGE: next_page})
        logger.info(f"Loading page {next_page}...")
        await next_button.click()
        await self.client.wait_for_navigation()
        return True

    async def run(self) -> list[Profile]:
        """Scrape pages while scraping is active and the page limit isn't reached."""
        while True:
            settings = db.get_state(
                [
                    ScrapeStateKey.IS_SCRAPING_ACTIVE,
                    ScrapeStateKey.CURRENT_PAGE,
                    ScrapeStateKey.MAX_PAGES,
                ]
            )
            if not settings.get(ScrapeStateKey.IS_SCRAPING_ACTIVE):
                break

            await self.scrape_current_page()

            current_page = settings.get(ScrapeStateKey.CURRENT_PAGE) or 1
            max_pages = settings.get(ScrapeStateKey.MAX_PAGES) or 1
            if current_page >= max_pages:
                self._stop("Scraping complete!")
                break

            await asyncio.sleep(config.PAGE_DELAY)
            if not await self.go_to_next_page(current_page + 1):
                break

        return get_profiles()

    async def start(self, query: str, max_pages: int | None = None) -> list[Profile]:
        """Reset the scrape state, open the search in a new tab and scrape it."""
        db.set_state(
            {
                ScrapeStateKey.IS_SCRAPING_ACTIVE: True,
                ScrapeStateKey.CURRENT_PAGE: 1,
                ScrapeStateKey.MAX_PAGES: max_pages or config.MAX_PAGES,
                ScrapeStateKey.PROFILES: [],
            }
        )
        search_url = build_search_url(query)
        logger.info(f"Opening search: {search_url}")

        db.on_state_changed(log_profile_count)
        try:
            await retry_async(
                lambda: self.client.new_tab(search_url),
                max_attempts=config.NAVIGATION_MAX_ATTEMPTS,
                delay=config.NAVIGATION_RETRY_DELAY,
                exceptions=(NavigationError, PlaywrightTimeoutError),
                operation_name="Opening search results",
            )
            return await self.run()
        except BaseException:
            db.set_state({ScrapeStateKey.IS_SCRAPING_ACTIVE: False})
            raise
        finally:
            db.remove_state_listener(log_profile_count)
