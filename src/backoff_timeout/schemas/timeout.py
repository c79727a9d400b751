# schemas/timeout.py

from typing import Annotated, Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt


class RandomWindow(NamedTuple):
    """
    Multipliers bounding a randomised timeout.

    Attributes:
        upper: Multiplier for the top of the window, `1 + f`.
        lower: Multiplier for the bottom of the window, `1 - f`.
    """

    upper: float
    lower: float


class Timeout(BaseModel):
    """
    Immutable snapshot of a configurable timeout.

    Holds the configuration supplied at construction (base, backoff, ceiling,
    randomisation window and scheduler) alongside the derived state that the
    domain operations move forward: the current backoff value, the backoff
    round and the handle of an outstanding scheduled delivery.

    Every operation returns a new instance; nothing mutates in place.

    Returns:
        Timeout: A frozen timeout value.
    """

    model_config = ConfigDict(strict=True, frozen=True, arbitrary_types_allowed=True)

    # configuration
    base: PositiveInt
    backoff: Annotated[float, Field(gt=1)] | None = None
    backoff_max: PositiveInt | None = None
    random: RandomWindow | None = None

    # derived state
    backoff_round: NonNegativeInt = 0
    current: PositiveInt | None = None

    # opaque handle owned by the scheduler, never inspected here
    timer: Any = None

    # scheduler collaborator, None falls back to the process default
    scheduler: Any = Field(default=None, exclude=True, repr=False)
