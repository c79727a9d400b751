# schedulers/threading_scheduler.py

import logging
import threading
import time
from functools import cache
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


class ThreadingScheduler:
    """
    Scheduler backed by `threading.Timer`.

    Each delivery runs on its own daemon timer thread. A lock guards the
    delivery state so that a cancellation racing with a firing timer reports
    exactly one of CANCELLED or ALREADY_FIRED, and the message is delivered
    only in the latter case.
    """

    __slots__ = ("_lock",)

    def __init__(self) -> None:
        self._lock = threading.Lock()

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
        """
        seconds = delay / 1000

        delivery = ScheduledDelivery(
            deadline=time.monotonic() + seconds,
            clock=time.monotonic,
        )
        timer = threading.Timer(
            seconds,
            self._fire,
            args=(delivery, target, message),
        )
        timer.daemon = True
        delivery.native = timer
        timer.start()

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

        with self._lock:
            if delivery.state is not DeliveryState.PENDING:
                return settled_result(delivery)

            result = cancelled_result(delivery)
            delivery.native.cancel()
            delivery.state = DeliveryState.CANCELLED

        logger.debug("Cancelled delivery with %dms remaining.", result.remaining)
        return result

    def _fire(self, delivery: ScheduledDelivery, target: Target, message: Any) -> None:
        with self._lock:
            if delivery.state is not DeliveryState.PENDING:
                return
            delivery.state = DeliveryState.FIRED

        deliver(target, message)


@cache
def default_scheduler() -> ThreadingScheduler:
    """
    Return the process-wide scheduler used by timeouts that carry none.

    Returns:
        ThreadingScheduler: A shared scheduler instance.
    """
    return ThreadingScheduler()
