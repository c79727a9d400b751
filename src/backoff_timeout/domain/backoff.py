# domain/backoff.py

import math

from backoff_timeout.schemas import Timeout

from ._utils import round_half_up


def reset_timeout(timeout: Timeout) -> Timeout:
    """
    Reset the backoff of a timeout back to its base value.

    Any outstanding timer is left in place.

    Returns:
        Timeout: A copy with the backoff round and current value cleared.
    """
    return timeout.model_copy(update={"backoff_round": 0, "current": None})


def next_timeout(timeout: Timeout) -> Timeout:
    """
    Grow the current timeout according to its backoff configuration.

    Without a backoff the timeout is returned as is. With a `backoff_max`, the
    timeout never grows above that value and stays there once reached. Without
    one, a float backoff stops growing once its value overflows a float.

    Note:
        The first call after construction or reset yields the base value, so
        the initial timeout is used once before any growth is applied.

    Returns:
        Timeout: A copy holding the next timeout value.
    """
    if timeout.backoff is None:
        return timeout

    ceiling = timeout.backoff_max
    if ceiling is not None and timeout.current == ceiling:
        return timeout

    grown = _grow(timeout)
    if grown is None and ceiling is None:
        return timeout

    if ceiling is not None:
        grown = ceiling if grown is None else min(grown, ceiling)

    return timeout.model_copy(
        update={"backoff_round": timeout.backoff_round + 1, "current": grown},
    )


def _grow(timeout: Timeout) -> int | None:
    """
    Compute the backoff value for the current round.

    Returns:
        int | None: The rounded value, or None once the growth no longer fits
            in a float and the timeout has saturated.
    """
    try:
        grown = timeout.base * timeout.backoff**timeout.backoff_round
    except OverflowError:
        return None

    if isinstance(grown, float) and not math.isfinite(grown):
        return None

    return round_half_up(grown)
