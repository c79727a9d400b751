# _utils/__init__.py

from ._random import RandomSource, default_random_source, parse_random_window
from ._rounding import round_half_up, scale_half_up

__all__ = [
    "RandomSource",
    "default_random_source",
    "parse_random_window",
    "round_half_up",
    "scale_half_up",
]
