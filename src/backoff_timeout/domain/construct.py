# domain/construct.py

from backoff_timeout.schemas import Timeout

from ._utils import parse_random_window


def create_timeout(
    base: int,
    *,
    backoff: float | int | None = None,
    backoff_max: int | None = None,
    random: float | None = None,
    scheduler: object | None = None,
) -> Timeout:
    """
    Build a Timeout from a base duration and optional configuration.

    Args:
        base: Timeout in milliseconds, a positive integer.
        backoff: Growth factor applied by `next_timeout`, expected `> 1`.
        backoff_max: Ceiling the backoff never grows past.
        random: Fraction to randomise within, `0 < random < 1`. For example
            0.10 randomises within +/- 10% of the current timeout.
        scheduler: Scheduler used by `send_after` and `cancel_timer`, or
            None for the process default.

    Returns:
        Timeout: A fresh timeout with no backoff applied and no timer.

    Raises:
        InvalidRandomWindowError: If `random` is outside `(0, 1)`.
        pydantic.ValidationError: If any other option is malformed.
    """
    return Timeout(
        base=base,
        backoff=backoff,
        backoff_max=backoff_max,
        random=parse_random_window(random),
        scheduler=scheduler,
    )
