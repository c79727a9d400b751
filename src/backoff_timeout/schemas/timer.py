# schemas/timer.py

from enum import Enum, auto

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class CancelOutcome(Enum):
    """
    Outcome of an attempt to cancel a scheduled delivery.

    Attributes:
        CANCELLED: The delivery was pending and will no longer happen.
        ALREADY_FIRED: The delivery had already been made.
        ALREADY_CANCELLED: The handle was cancelled before.
        NO_TIMER_PENDING: The timeout held no handle to cancel.
    """

    CANCELLED = auto()
    ALREADY_FIRED = auto()
    ALREADY_CANCELLED = auto()
    NO_TIMER_PENDING = auto()


class CancelResult(BaseModel):
    """
    Result reported by a scheduler when cancelling a delivery.

    `remaining` carries the milliseconds left before the delivery would have
    been made, and is only set for a successful cancellation. It is 0 when the
    deadline had passed but the delivery had not yet run.
    """

    model_config = ConfigDict(frozen=True)

    outcome: CancelOutcome
    remaining: NonNegativeInt | None = None

    @property
    def cancelled(self) -> bool:
        return self.outcome is CancelOutcome.CANCELLED


NO_TIMER_PENDING = CancelResult(outcome=CancelOutcome.NO_TIMER_PENDING)
ALREADY_FIRED = CancelResult(outcome=CancelOutcome.ALREADY_FIRED)
ALREADY_CANCELLED = CancelResult(outcome=CancelOutcome.ALREADY_CANCELLED)
