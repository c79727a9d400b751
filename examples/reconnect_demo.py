#!/usr/bin/env python3
"""
Reconnect demo for the backoff-timeout package.

Simulates a client that fails to connect a few times, backing off between
attempts with a randomised, capped timeout, and resets the backoff once the
connection succeeds. Also shows scheduling and cancelling a delivery.

Run with: python examples/reconnect_demo.py
"""

import asyncio
import logging

from backoff_timeout import (
    AsyncioScheduler,
    cancel_timer,
    create_timeout,
    current_timeout,
    reset_timeout,
    send_after,
    sleep_next,
)

logging.basicConfig(
    level=logging.DEBUG,
    format="%(levelname)-8s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

_FAILED_ATTEMPTS = 4


async def demo_reconnect() -> None:
    """Back off between failed attempts, then reset once connected."""
    timeout = create_timeout(50, backoff=1.5, backoff_max=400, random=0.10)

    for attempt in range(1, _FAILED_ATTEMPTS + 2):
        if attempt > _FAILED_ATTEMPTS:
            logger.info("Attempt %d: connected.", attempt)
            timeout = reset_timeout(timeout)
            break

        timeout, delay = await sleep_next(timeout)
        logger.info("Attempt %d: failed after waiting %dms.", attempt, delay)

    logger.info("Next wait after reset: ~%dms.", current_timeout(timeout))


async def demo_timers() -> None:
    """Schedule a heartbeat, receive it, then schedule and cancel another."""
    mailbox: asyncio.Queue[str] = asyncio.Queue()
    timeout = create_timeout(20, backoff=2, scheduler=AsyncioScheduler())

    timeout, delay = send_after(timeout, mailbox, "heartbeat")
    logger.info("Heartbeat scheduled in %dms.", delay)
    logger.info("Received %r.", await mailbox.get())

    timeout, delay = send_after(timeout, mailbox, "heartbeat")
    timeout, result = cancel_timer(timeout)
    logger.info(
        "Cancelled heartbeat due in %dms: %s (%sms left).",
        delay,
        result.outcome.name,
        result.remaining,
    )


async def main() -> None:
    await demo_reconnect()
    await demo_timers()


if __name__ == "__main__":
    asyncio.run(main())
