"""
Constants for the LinkedIn leads tools.
Centralized constants including status enums.
"""

from enum import StrEnum


class LogLevel(StrEnum):
    """Levels used by the status log."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ScrapeStateKey(StrEnum):
    """Keys held in the scrape state store."""

    IS_SCRAPING_ACTIVE = "isScrapingActive"
    CURRENT_PAGE = "currentPage"
    MAX_PAGES = "maxPages"
    PROFILES = "profiles"
