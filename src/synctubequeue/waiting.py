"""Bounded polling for conditions without a completion signal."""

import asyncio
import time
from typing import Callable, Optional

from . import config
from .errors import WaitTimeoutError
from .logging_config import get_logger

logger = get_logger(__name__)


async def wait_until(
    predicate: Callable[[], bool],
    timeout_ms: float,
    interval_ms: Optional[float] = None,
) -> None:
    """Wait until ``predicate`` returns True.

    The predicate is checked at call time and then every ``interval_ms``.

    Args:
        predicate: Condition to poll
        timeout_ms: Maximum time to wait, in milliseconds
        interval_ms: Polling interval, in milliseconds

    Raises:
        WaitTimeoutError: If the predicate is still false after ``timeout_ms``
    """
    if interval_ms is None:
        interval_ms = config.POLL_INTERVAL_MS

    start = time.monotonic()
    while True:
        if predicate():
            return
        elapsed_ms = (time.monotonic() - start) * 1000
        if elapsed_ms > timeout_ms:
            logger.debug("Gave up waiting after %.0fms", elapsed_ms)
            raise WaitTimeoutError(timeout_ms, elapsed_ms)
        await asyncio.sleep(interval_ms / 1000)
