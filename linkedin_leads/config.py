"""
Configuration constants for the LinkedIn leads tools.
Centralized configuration for the scraper and the dedup pipeline.
Supports environment variable overrides.
"""

import os
from pathlib import Path


def _get_env_float(key: str, default: float, min_value: float = 0.0) -> float:
    """Get float from environment variable with validation."""
    if (value := os.getenv(key)) is None:
        return default
    try:
        float_value = float(value)
        if float_value < min_value:
            raise ValueError(f"{key} must be >= {min_value}")
        return float_value
    except ValueError as e:
        raise ValueError(f"Invalid value for {key}: {e}") from e


def _get_env_int(key: str, default: int, min_value: int = 0) -> int:
    """Get int from environment variable with validation."""
    if (value := os.getenv(key)) is None:
        return default
    try:
        int_value = int(value)
        if int_value < min_value:
            raise ValueError(f"{key} must be >= {min_value}")
        return int_value
    except ValueError as e:
        raise ValueError(f"Invalid value for {key}: {e}") from e


def _get_env_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable."""
    if (value := os.getenv(key)) is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


# Find project root (directory containing pyproject.toml)
_PROJECT_ROOT = Path(__file__).parent.parent

# File paths (can be overridden via environment variables)
STATE_DB = os.getenv("LEADS_STATE_DB", str(_PROJECT_ROOT / "data" / "scrape_state.db"))
PROFILES_CSV = os.getenv("LEADS_PROFILES_CSV", str(_PROJECT_ROOT / "data" / "scraped_profiles.csv"))
OUTPUT_DIR = os.getenv("LEADS_OUTPUT_DIR", str(_PROJECT_ROOT / "data" / "exports"))

# Logging: a level name such as DEBUG, INFO or WARNING
LOG_LEVEL = os.getenv("LEADS_LOG_LEVEL", "INFO")

# Dedup settings
PROFILE_URL_MARKER = "linkedin.com/in/"
DETECTION_SAMPLE_SIZE = _get_env_int("LEADS_DETECTION_SAMPLE_SIZE", 10, min_value=1)
EXPORT_FILENAME_PREFIX = "Cleaned_Leads"
EXPORT_SHEET_NAME = "Unique Records"
SUPPORTED_EXTENSIONS = (".csv", ".xlsx", ".xlsm")

# Google search
GOOGLE_SEARCH_URL = "https://www.google.com/search"
SEARCH_SITE_FILTER = "site:linkedin.com/in/"

# Scraping (can be overridden via environment variables)
MAX_PAGES = _get_env_int("LEADS_MAX_PAGES", 1, min_value=1)
PAGE_DELAY = _get_env_float("LEADS_PAGE_DELAY", 3.0, min_value=0.0)
SCRAPE_TIMEOUT = _get_env_float("LEADS_SCRAPE_TIMEOUT", 600.0, min_value=1.0)

# Browser settings (can be overridden via environment variables)
BROWSER_HEADLESS = _get_env_bool("LEADS_BROWSER_HEADLESS", False)
BROWSER_VIEWPORT_WIDTH = _get_env_int("LEADS_BROWSER_VIEWPORT_WIDTH", 1920, min_value=1)
BROWSER_VIEWPORT_HEIGHT = _get_env_int("LEADS_BROWSER_VIEWPORT_HEIGHT", 1080, min_value=1)
USER_AGENT = os.getenv(
    "LEADS_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)
BROWSER_LOCALE = os.getenv("LEADS_BROWSER_LOCALE", "en-US")

# Timeouts (can be overridden via environment variables, in milliseconds)
NAVIGATION_TIMEOUT = _get_env_int("LEADS_NAVIGATION_TIMEOUT", 30000, min_value=1000)
SELECTOR_TIMEOUT = _get_env_int("LEADS_SELECTOR_TIMEOUT", 10000, min_value=1000)

# Selectors - Google search results
SEARCH_RESULT_SELECTOR = "div.g"
RESULT_TITLE_SELECTOR = "h3"
PROFILE_LINK_SELECTOR = 'a[href*="linkedin.com/in/"]'
NEXT_BUTTON_SELECTOR = "#pnnext"

# Retry settings for navigation
NAVIGATION_MAX_ATTEMPTS = _get_env_int("LEADS_NAVIGATION_MAX_ATTEMPTS", 3, min_value=1)
NAVIGATION_RETRY_DELAY = _get_env_float("LEADS_NAVIGATION_RETRY_DELAY", 1.0, min_value=0.0)
