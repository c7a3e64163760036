"""
Shared utility functions for the LinkedIn leads scripts.
"""
import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Callable, Optional

from linkedin_leads.browser_client import BrowserClient


class BrowserClientError(Exception):
    """Exception raised when the browser cannot be started."""
    pass


def print_banner(title: str):
    """Print a formatted banner."""
    print(f"\n{'='*80}")
    print(title)
    print(f"{'='*80}\n")


async def with_timeout(
    coro,
    timeout: float,
    operation_name: str,
    on_timeout: Optional[Callable[[], None]] = None
) -> Optional[Any]:
    """
    Execute a coroutine with timeout.

    Args:
        coro: Coroutine to execute
        timeout: Timeout in seconds
        operation_name: Name of operation for error message
        on_timeout: Optional callback to call on timeout (e.g., to mark scraping inactive)

    Returns:
        Result of coroutine, or None on timeout
    """
    try:
        return await asyncio.wait_for(coro, timeout=timeout)
    except asyncio.TimeoutError:
        print(f"\n❌ TIMEOUT: {operation_name} timeout after {timeout}s")
        if on_timeout:
            on_timeout()
        return None


@asynccontextmanager
async def setup_browser_client() -> AsyncGenerator[BrowserClient, None]:
    """
    Context manager for setting up and cleaning up the browser client.

    Raises BrowserClientError if the browser can't be launched.

    Usage:
        try:
            async with setup_browser_client() as client:
                # Use client here
        except BrowserClientError as e:
            print(f"Failed to start browser: {e}")
            return
    """
    client = BrowserClient()

    try:
        print("🌐 Setting up browser...")
        try:
            await client.setup_browser()
        except Exception as e:
            raise BrowserClientError(f"Failed to start browser: {e}") from e
        print("✓ Browser ready\n")

        yield client

    finally:
        # Always cleanup browser
        print("\n🔒 Closing browser...")
        await client.close()
        print("✓ Browser closed")
