# domain/timers.py

import logging
from typing import Any

from backoff_timeout.adapters.schedulers import Scheduler, Target, default_scheduler
from backoff_timeout.schemas import NO_TIMER_PENDING, CancelResult, Timeout

from ._utils import RandomSource
from .backoff import next_timeout
from .current import current_timeout

logger = logging.getLogger(__name__)


def send_after(
    timeout: Timeout,
    target: Target,
    message: Any,
    *,
    rng: RandomSource | None = None,
) -> tuple[Timeout, int]:
    """
    Schedule `message` for `target` using the next timeout value, and store
    the resulting timer on the timeout.

    Always calls `next_timeout` first, then delays the message by
    `current_timeout` of the advanced value. A timer already held by the
    timeout is cancelled before the new one is scheduled.

    This is a convenience wrapper around the following workflow:

        timeout = next_timeout(timeout)
        delay = current_timeout(timeout)
        timer = scheduler.schedule_after(target, message, delay)

    Args:
        timeout: The timeout to schedule with.
        target: Callable invoked with the message, or a mailbox exposing
            `put_nowait`.
        message: The message to deliver.
        rng: Random source for a randomised timeout.

    Returns:
        tuple[Timeout, int]: The updated timeout and the delay used, in
            milliseconds.
    """
    if timeout.timer is not None:
        timeout, replaced = cancel_timer(timeout)
        logger.debug("Replaced previous timer: %s.", replaced.outcome.name)

    timeout = next_timeout(timeout)
    delay = current_timeout(timeout, rng=rng)

    timer = _scheduler_for(timeout).schedule_after(target, message, delay)

    return timeout.model_copy(update={"timer": timer}), delay


def send_after_timeout(
    timeout: Timeout,
    target: Target,
    message: Any,
    *,
    rng: RandomSource | None = None,
) -> Timeout:
    """
    Call `send_after`, returning only the updated timeout.

    Returns:
        Timeout: The timeout holding the new timer.
    """
    updated, _ = send_after(timeout, target, message, rng=rng)
    return updated


def cancel_timer(timeout: Timeout) -> tuple[Timeout, CancelResult]:
    """
    Cancel the timer stored on the timeout.

    Returns:
        tuple[Timeout, CancelResult]: The timeout with its timer cleared and
            the scheduler's result, or the unchanged timeout and
            NO_TIMER_PENDING when there is no timer.
    """
    if timeout.timer is None:
        return timeout, NO_TIMER_PENDING

    result = _scheduler_for(timeout).cancel(timeout.timer)

    return timeout.model_copy(update={"timer": None}), result


def cancel_timer_timeout(timeout: Timeout) -> Timeout:
    """
    Call `cancel_timer`, returning only the updated timeout.

    Returns:
        Timeout: The timeout with no timer.
    """
    updated, _ = cancel_timer(timeout)
    return updated


def _scheduler_for(timeout: Timeout) -> Scheduler:
    if timeout.scheduler is None:
        return default_scheduler()
    return timeout.scheduler
