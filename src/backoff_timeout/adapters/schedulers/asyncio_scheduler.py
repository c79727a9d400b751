# schedulers/asyncio_scheduler.py

import asyncio
import logging
from typing import Any

from backoff_timeout.schemas import CancelResult

from .base import (
    DeliveryState,
    ScheduledDelivery,
    Target,
    cancelled_result,
    deliver,
    ensure_delivery,
    settled_result,
)

logger = logging.getLogger(__name__)


class AsyncioScheduler:
    """
    Scheduler backed by an asyncio event loop.

    Deliveries are registered with `loop.call_later` and run on the loop
    thread. When no loop is given, the loop running at scheduling time is
    used. Both methods must be called from the loop thread.
    """

    __slots__ = ("_loop",)

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """
        Initialise with an optional fixed event loop.

        Args:
            loop: Loop to schedule on, or None to use the running loop.
        """
        self._loop = loop

    def schedule_after(
        self,
        target: Target,
        message: Any,
        delay: int,
    ) -> ScheduledDelivery:
        """
        Deliver `message` to `target` once `delay` milliseconds have passed.

        Returns:
            ScheduledDelivery: Handle for cancelling the delivery.

        Raises:
            RuntimeError: If no loop was given and none is running.
        """
        loop = self._loop or asyncio.get_running_loop()
        seconds = delay / 1000

        delivery = ScheduledDelivery(deadline=loop.time() + seconds, clock=loop.time)
        delivery.native = loop.call_later(
            seconds,
            self._fire,
            delivery,
            target,
            message,
        )

        logger.debug("Scheduled delivery of %r in %dms.", message, delay)
        return delivery

    def cancel(self, handle: ScheduledDelivery) -> CancelResult:
        """
        Cancel a pending delivery.

        Returns:
            CancelResult: CANCELLED with the remaining milliseconds, or
                ALREADY_FIRED / ALREADY_CANCELLED for a settled handle.
        """
        delivery = ensure_delivery(handle)

        if delivery.state is not DeliveryState.PENDING:
            return settled_result(delivery)

        result = cancelled_result(delivery)
        delivery.native.cancel()
        delivery.state = DeliveryState.CANCELLED

        logger.debug("Cancelled delivery with %dms remaining.", result.remaining)
        return result

    @staticmethod
    def _fire(delivery: ScheduledDelivery, target: Target, message: Any) -> None:
        delivery.state = DeliveryState.FIRED
        deliver(target, message)
