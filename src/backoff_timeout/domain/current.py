# domain/current.py

from backoff_timeout.schemas import RandomWindow, Timeout

from ._utils import RandomSource, default_random_source, scale_half_up


def current_timeout(timeout: Timeout, *, rng: RandomSource | None = None) -> int:
    """
    Return the timeout value represented by the current state.

    Uses the backoff value when one has been computed, otherwise the base.
    When a random window is configured, a fresh value is drawn within it on
    every call; the timeout itself is never modified.

    Args:
        timeout: The timeout to read.
        rng: Random source for the draw, defaults to the `random` module.

    Returns:
        int: The timeout in milliseconds, always at least 1.
    """
    value = timeout.current if timeout.current is not None else timeout.base

    if timeout.random is None:
        return value

    return _randomise(value, timeout.random, rng or default_random_source())


def _randomise(value: int, window: RandomWindow, rng: RandomSource) -> int:
    """
    Draw a value uniformly from the window around `value`.

    The draw lands in `(lower, upper]`, or on `lower` for a zero-width window,
    and is floored at 1 so a narrow window never yields a zero delay.

    Returns:
        int: The randomised value.
    """
    upper = scale_half_up(value, window.upper)
    lower = scale_half_up(value, window.lower)

    width = upper - lower
    drawn = lower + rng.randint(1, width) if width > 0 else lower

    return max(1, drawn)
