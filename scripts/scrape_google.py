"""
Google Search LinkedIn Scraper
Collects LinkedIn profile names and URLs from Google search results across result pages.
"""
import argparse
import asyncio
import sys

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from linkedin_leads import config, db
from linkedin_leads.browser_client import NavigationError
from linkedin_leads.constants import ScrapeStateKey
from linkedin_leads.google_scraper import GoogleSearchScraper, build_search_url
from linkedin_leads.logging_config import setup_logging
from linkedin_leads.utils import BrowserClientError, print_banner, setup_browser_client, with_timeout

logger = setup_logging()


async def run_scrape(query: str, max_pages: int) -> int:
    """Main execution function. Returns the process exit code."""
    print_banner("GOOGLE SEARCH LINKEDIN SCRAPER")
    print(f"🔎 Query: {query}")
    print(f"🔗 Search URL: {build_search_url(query)}")
    print(f"📄 Max pages: {max_pages}\n")

    try:
        async with setup_browser_client() as client:
            print("🚀 Starting profile extraction...")
            profiles = await with_timeout(
                GoogleSearchScraper(client).start(query, max_pages=max_pages),
                config.SCRAPE_TIMEOUT,
                "Scraping",
                on_timeout=lambda: db.set_state({ScrapeStateKey.IS_SCRAPING_ACTIVE: False}),
            )
    except (BrowserClientError, NavigationError, PlaywrightTimeoutError) as e:
        print(f"\n❌ {e}")
        return 1

    if profiles is None:
        return 1

    print(f"\n{'='*80}")
    print(f"📋 EXTRACTED PROFILES ({len(profiles)} total)")
    print(f"{'='*80}")
    for idx, profile in enumerate(profiles, 1):
        print(f"{idx:4d}. {profile['name']:40s} | {profile['url']}")
    print(f"{'='*80}\n")
    print(f"💾 Profiles saved to: {config.STATE_DB}")
    return 0


def main():
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Google Search LinkedIn Scraper - collect profile links from search results"
    )
    parser.add_argument(
        "--query", type=str, required=True, help="Search terms, e.g. 'data engineer Berlin'"
    )
    parser.add_argument(
        "--max-pages",
        type=int,
        default=config.MAX_PAGES,
        help=f"Number of result pages to scrape (default: {config.MAX_PAGES})",
    )
    args = parser.parse_args()

    if args.max_pages < 1:
        parser.error("--max-pages must be at least 1")

    sys.exit(asyncio.run(run_scrape(args.query, args.max_pages)))


if __name__ == "__main__":
    main()
