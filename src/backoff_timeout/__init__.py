# backoff_timeout/__init__.py

from .errors import InvalidRandomWindowError
from .schemas import (
    NO_TIMER_PENDING,
    CancelOutcome,
    CancelResult,
    RandomWindow,
    Timeout,
)
from .adapters import (
    AsyncioScheduler,
    ScheduledDelivery,
    Scheduler,
    ThreadingScheduler,
    default_scheduler,
)
from .domain import (
    cancel_timer,
    cancel_timer_timeout,
    create_timeout,
    current_timeout,
    next_timeout,
    reset_timeout,
    send_after,
    send_after_timeout,
    sleep_next,
)
from .config import TimeoutConfig, load_timeout_config

__all__ = [
    # errors
    "InvalidRandomWindowError",
    # schemas
    "NO_TIMER_PENDING",
    "CancelOutcome",
    "CancelResult",
    "RandomWindow",
    "Timeout",
    # schedulers
    "AsyncioScheduler",
    "ScheduledDelivery",
    "Scheduler",
    "ThreadingScheduler",
    "default_scheduler",
    # operations
    "create_timeout",
    "reset_timeout",
    "next_timeout",
    "current_timeout",
    "send_after",
    "send_after_timeout",
    "cancel_timer",
    "cancel_timer_timeout",
    "sleep_next",
    # config
    "TimeoutConfig",
    "load_timeout_config",
]
