"""
Tests for the browser client.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from linkedin_leads.browser_client import BrowserClient, NavigationError


@pytest.mark.asyncio
async def test_navigate_to_raises_on_http_error(mock_page):
    client = BrowserClient()
    client.page = mock_page
    mock_page.goto = AsyncMock(return_value=MagicMock(status=429))

    with pytest.raises(NavigationError, match="Rate limited") as exc_info:
        await client.navigate_to("https://www.google.com/search?q=x")

    assert exc_info.value.status == 429


@pytest.mark.asyncio
async def test_new_tab_becomes_active_page(mock_page):
    client = BrowserClient()
    client.context = AsyncMock()
    client.context.new_page = AsyncMock(return_value=mock_page)
    mock_page.goto = AsyncMock(return_value=MagicMock(status=200))

    page = await client.new_tab("https://www.google.com/search?q=x")

    assert page is mock_page
    assert client.page is mock_page
    mock_page.goto.assert_awaited_once()


@pytest.mark.asyncio
async def test_close_resets_state_even_if_browser_close_fails():
    client = BrowserClient()
    browser = AsyncMock()
    browser.close = AsyncMock(side_effect=RuntimeError("already gone"))
    playwright = AsyncMock()
    client.browser = browser
    client.playwright = playwright
    client.page = AsyncMock()

    await client.close()

    playwright.stop.assert_awaited_once()
    assert client.browser is None and client.page is None
