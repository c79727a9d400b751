# schedulers/base.py

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

from backoff_timeout.schemas import (
    ALREADY_CANCELLED,
    ALREADY_FIRED,
    CancelOutcome,
    CancelResult,
)


@runtime_checkable
class Mailbox(Protocol):
    """
    A delivery target that accepts messages without blocking, such as
    `asyncio.Queue` or `queue.Queue`.
    """

    def put_nowait(self, item: Any) -> None: ...


Target = Mailbox | Callable[[Any], object]


class Scheduler(Protocol):
    """
    Collaborator able to deliver a message after a delay and to cancel a
    pending delivery.

    Delays are expressed in milliseconds. Handles returned by
    `schedule_after` are opaque to callers and are only passed back to
    `cancel`, which must tolerate handles that already fired or were already
    cancelled.
    """

    def schedule_after(self, target: Target, message: Any, delay: int) -> Any: ...

    def cancel(self, handle: Any) -> CancelResult: ...


class DeliveryState(Enum):
    """
    Lifecycle of a scheduled delivery.
    """

    PENDING = auto()
    FIRED = auto()
    CANCELLED = auto()


@dataclass(eq=False, slots=True)
class ScheduledDelivery:
    """
    Handle to a delivery registered with a scheduler.

    Compared and hashed by identity. `deadline` is expressed on the clock of
    the scheduler that created it, in seconds.
    """

    deadline: float
    clock: Callable[[], float] = field(repr=False)
    native: Any = field(default=None, repr=False)
    state: DeliveryState = DeliveryState.PENDING

    def remaining(self) -> int:
        """
        Milliseconds left until the deadline, rounded up and never negative.

        Returns:
            int: Remaining milliseconds.
        """
        return max(0, math.ceil((self.deadline - self.clock()) * 1000))


def deliver(target: Target, message: Any) -> None:
    """
    Hand a message to its target, either through `put_nowait` or by calling
    it.
    """
    if isinstance(target, Mailbox):
        target.put_nowait(message)
    else:
        target(message)


def settled_result(delivery: ScheduledDelivery) -> CancelResult:
    """
    Map a delivery that is no longer pending to its cancellation result.

    Returns:
        CancelResult: ALREADY_FIRED or ALREADY_CANCELLED.
    """
    if delivery.state is DeliveryState.FIRED:
        return ALREADY_FIRED
    return ALREADY_CANCELLED


def cancelled_result(delivery: ScheduledDelivery) -> CancelResult:
    """
    Build the result of a successful cancellation.

    Returns:
        CancelResult: CANCELLED with the remaining milliseconds.
    """
    return CancelResult(
        outcome=CancelOutcome.CANCELLED,
        remaining=delivery.remaining(),
    )


def ensure_delivery(handle: Any) -> ScheduledDelivery:
    """
    Check that a handle was produced by one of the bundled schedulers.

    Returns:
        ScheduledDelivery: The handle, unchanged.

    Raises:
        TypeError: If the handle is of any other type.
    """
    if not isinstance(handle, ScheduledDelivery):
        raise TypeError(f"Expected a ScheduledDelivery handle, got: {handle!r}")
    return handle
