# domain/__init__.py

from .backoff import next_timeout, reset_timeout
from .construct import create_timeout
from .current import current_timeout
from .timers import cancel_timer, cancel_timer_timeout, send_after, send_after_timeout
from .waiting import sleep_next

__all__ = [
    "create_timeout",
    "reset_timeout",
    "next_timeout",
    "current_timeout",
    "send_after",
    "send_after_timeout",
    "cancel_timer",
    "cancel_timer_timeout",
    "sleep_next",
]
