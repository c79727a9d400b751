# api/test_package.py

import pytest

import backoff_timeout

pytestmark = pytest.mark.unit


def test_package_exports_all_names() -> None:
    """
    ARRANGE: the public package
    ACT:     resolve every name in __all__
    ASSERT:  each name is an attribute of the package
    """
    missing = [
        name for name in backoff_timeout.__all__ if not hasattr(backoff_timeout, name)
    ]

    assert missing == []


def test_package_round_trip_of_backoff_workflow() -> None:
    """
    ARRANGE: timeout built through the top-level API
    ACT:     next_timeout three times, then reset_timeout
    ASSERT:  values are 100, 125, 156 and reset restores 100
    """
    timeout = backoff_timeout.create_timeout(100, backoff=1.25)
    seen = []
    for _ in range(3):
        timeout = backoff_timeout.next_timeout(timeout)
        seen.append(backoff_timeout.current_timeout(timeout))

    reset = backoff_timeout.reset_timeout(timeout)

    assert seen == [100, 125, 156] and backoff_timeout.current_timeout(reset) == 100
