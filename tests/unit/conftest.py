# tests/unit/conftest.py

from typing import Any

import pytest

from backoff_timeout.schemas import (
    ALREADY_CANCELLED,
    CancelOutcome,
    CancelResult,
)


class RecordingScheduler:
    """
    Scheduler double that records scheduled deliveries and cancellations
    instead of running any timers.
    """

    def __init__(self) -> None:
        self.scheduled: list[tuple[Any, Any, int]] = []
        self.cancelled: list[object] = []
        self._pending: set[object] = set()

    def schedule_after(self, target: Any, message: Any, delay: int) -> object:
        handle = object()
        self.scheduled.append((target, message, delay))
        self._pending.add(handle)
        return handle

    def cancel(self, handle: object) -> CancelResult:
        self.cancelled.append(handle)
        if handle not in self._pending:
            return ALREADY_CANCELLED
        self._pending.discard(handle)
        return CancelResult(outcome=CancelOutcome.CANCELLED, remaining=1)


@pytest.fixture
def scheduler() -> RecordingScheduler:
    """
    Provide a fresh RecordingScheduler.

    Returns:
        RecordingScheduler: Scheduler double with no deliveries recorded.
    """
    return RecordingScheduler()
