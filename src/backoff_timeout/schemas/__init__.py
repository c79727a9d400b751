# schemas/__init__.py

from .timeout import RandomWindow, Timeout
from .timer import (
    ALREADY_CANCELLED,
    ALREADY_FIRED,
    NO_TIMER_PENDING,
    CancelOutcome,
    CancelResult,
)

__all__ = [
    # timeout
    "RandomWindow",
    "Timeout",
    # timer
    "ALREADY_CANCELLED",
    "ALREADY_FIRED",
    "NO_TIMER_PENDING",
    "CancelOutcome",
    "CancelResult",
]
