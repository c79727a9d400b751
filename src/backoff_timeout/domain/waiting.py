# domain/waiting.py

import asyncio
import logging

from backoff_timeout.schemas import Timeout

from ._utils import RandomSource
from .backoff import next_timeout
from .current import current_timeout

logger = logging.getLogger(__name__)


async def sleep_next(
    timeout: Timeout,
    *,
    rng: RandomSource | None = None,
) -> tuple[Timeout, int]:
    """
    Advance the timeout and sleep for its next value.

    Suits poll and reconnect loops that wait inline rather than scheduling a
    message.

    Returns:
        tuple[Timeout, int]: The advanced timeout and the delay slept, in
            milliseconds.
    """
    timeout = next_timeout(timeout)
    delay = current_timeout(timeout, rng=rng)

    logger.debug("Sleeping for %dms (backoff round %d).", delay, timeout.backoff_round)
    await asyncio.sleep(delay / 1000)

    return timeout, delay
