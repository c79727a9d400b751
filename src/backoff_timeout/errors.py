# backoff_timeout/errors.py


class InvalidRandomWindowError(ValueError):
    """
    Raised when the `random` option of a timeout is not a real number strictly
    between 0 and 1.

    Attributes:
        value: The offending option value, as supplied by the caller.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid option for random. Expected 0 < float < 1, got: {value!r}",
        )
