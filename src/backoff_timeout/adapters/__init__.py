# adapters/__init__.py

from .schedulers import (
    AsyncioScheduler,
    ScheduledDelivery,
    Scheduler,
    ThreadingScheduler,
    default_scheduler,
)

__all__ = [
    "AsyncioScheduler",
    "ScheduledDelivery",
    "Scheduler",
    "ThreadingScheduler",
    "default_scheduler",
]
