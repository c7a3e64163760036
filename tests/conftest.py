"""
Pytest configuration and shared fixtures.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from linkedin_leads import config, db
from linkedin_leads.reporting import StatusReporter


@pytest.fixture
def mock_page():
    """Create a mock Playwright page object."""
    page = AsyncMock()
    page.url = "https://www.google.com/search?q=site%3Alinkedin.com%2Fin%2F"

    # Mock locator
    locator = AsyncMock()
    page.locator = MagicMock(return_value=locator)

    page.wait_for_selector = AsyncMock()
    page.query_selector_all = AsyncMock(return_value=[])
    page.evaluate = AsyncMock()

    return page


@pytest.fixture
def mock_client(mock_page):
    """Create a BrowserClient whose Playwright objects are mocks."""
    from linkedin_leads.browser_client import BrowserClient

    client = BrowserClient()
    client.page = mock_page
    client.context = AsyncMock()
    client.browser = AsyncMock()
    client.playwright = AsyncMock()

    # Mock methods
    client.new_tab = AsyncMock(return_value=mock_page)
    client.wait_for_navigation = AsyncMock()

    return client


@pytest.fixture
def reporter():
    """A status reporter that keeps every emitted line."""
    return StatusReporter()


@pytest.fixture
def temp_state_db(tmp_path, monkeypatch):
    """Point the scrape state store at a fresh database."""
    db_path = tmp_path / "state.db"
    monkeypatch.setattr(config, "STATE_DB", str(db_path))
    monkeypatch.setattr(db, "_listeners", [])
    return db_path


@pytest.fixture
def write_csv(tmp_path):
    """Write a CSV file under tmp_path and return its path."""

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
