# backoff_timeout/config.py

import os
from dataclasses import dataclass

from .domain import create_timeout
from .schemas import Timeout

DEFAULT_BASE_MS = 1000


@dataclass(frozen=True, slots=True)
class TimeoutConfig:
    """
    Immutable set of options for building a Timeout.

    Keeps the configuration of a timeout apart from its state, so the same
    options can seed any number of independent timeouts.

    Returns:
        TimeoutConfig: Immutable configuration object.
    """

    # base timeout in milliseconds
    base: int = DEFAULT_BASE_MS

    # growth factor applied on each backoff step
    backoff: float | None = None

    # ceiling for backoff growth, in milliseconds
    backoff_max: int | None = None

    # randomisation fraction, 0 < random < 1
    random: float | None = None

    def build(self, scheduler: object | None = None) -> Timeout:
        """
        Build a fresh Timeout from this configuration.

        Returns:
            Timeout: A timeout with no backoff applied and no timer.
        """
        return create_timeout(
            self.base,
            backoff=self.backoff,
            backoff_max=self.backoff_max,
            random=self.random,
            scheduler=scheduler,
        )


def load_timeout_config(prefix: str = "TIMEOUT") -> TimeoutConfig:
    """
    Read timeout options from the environment.

    Recognises `{prefix}_BASE_MS`, `{prefix}_BACKOFF`, `{prefix}_BACKOFF_MAX_MS`
    and `{prefix}_RANDOM`. Unset or empty variables fall back to the defaults.

    Returns:
        TimeoutConfig: The configuration described by the environment.

    Raises:
        ValueError: If a variable cannot be parsed or is negative.
    """
    base = _read_env(f"{prefix}_BASE_MS", int)

    return TimeoutConfig(
        base=DEFAULT_BASE_MS if base is None else base,
        backoff=_read_env(f"{prefix}_BACKOFF", float),
        backoff_max=_read_env(f"{prefix}_BACKOFF_MAX_MS", int),
        random=_read_env(f"{prefix}_RANDOM", float),
    )


def _read_env(name: str, parse: type[int] | type[float]) -> int | float | None:
    """
    Parse a numeric environment variable.

    Returns:
        int | float | None: The parsed value, or None if unset or empty.

    Raises:
        ValueError: If the value is unparsable or negative.
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return None

    value = parse(raw)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {raw}")

    return value
