# schedulers/__init__.py

from .asyncio_scheduler import AsyncioScheduler
from .base import (
    DeliveryState,
    Mailbox,
    ScheduledDelivery,
    Scheduler,
    Target,
    deliver,
)
from .threading_scheduler import ThreadingScheduler, default_scheduler

__all__ = [
    # base
    "DeliveryState",
    "Mailbox",
    "ScheduledDelivery",
    "Scheduler",
    "Target",
    "deliver",
    # implementations
    "AsyncioScheduler",
    "ThreadingScheduler",
    "default_scheduler",
]
