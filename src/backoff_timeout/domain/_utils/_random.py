# _utils/_random.py

import random as _random
from numbers import Real
from typing import Protocol

from backoff_timeout.errors import InvalidRandomWindowError
from backoff_timeout.schemas import RandomWindow


class RandomSource(Protocol):
    """
    Anything able to draw a uniform integer from a closed range, such as a
    `random.Random` instance or the `random` module itself.
    """

    def randint(self, a: int, b: int) -> int: ...


def default_random_source() -> RandomSource:
    """
    Return the process-wide random source.

    Returns:
        RandomSource: The `random` module, backed by its shared generator.
    """
    return _random


def parse_random_window(value: object) -> RandomWindow | None:
    """
    Convert a `random` option into the multipliers bounding the window.

    Returns:
        RandomWindow | None: `(1 + value, 1 - value)`, or None when the
            option is absent.

    Raises:
        InvalidRandomWindowError: If the value is not a real number strictly
            between 0 and 1.
    """
    if value is None:
        return None

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidRandomWindowError(value)

    if not 0 < value < 1:
        raise InvalidRandomWindowError(value)

    fraction = float(value)
    return RandomWindow(upper=1.0 + fraction, lower=1.0 - fraction)
