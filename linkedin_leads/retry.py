"""
Retry utilities for flaky browser navigation.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def retry_async(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
    operation_name: str = "operation",
) -> T:
    """Call func until it succeeds, sleeping delay * backoff**n between attempts."""
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    current_delay = delay
    for attempt in range(1, max_attempts + 1):
        try:
            return await func()
        except exceptions as e:
            if attempt == max_attempts:
                logger.error(f"{operation_name} failed after {max_attempts} attempts: {e}")
                raise
            logger.warning(
                f"{operation_name} attempt {attempt}/{max_attempts} failed: {e}. "
                f"Retrying in {current_delay:.2f}s..."
            )
            await asyncio.sleep(current_delay)
            current_delay *= backoff
