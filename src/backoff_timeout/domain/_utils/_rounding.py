# _utils/_rounding.py

from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_up(value: float | int) -> int:
    """
    Round a real value to the nearest integer, with halves rounded away from
    zero.

    Goes through the decimal string of the value so that products such as
    `100 * 1.25 ** 2` (156.25) and `100 * 1.1` (110.00000000000001) round the
    way they read rather than the way they are stored in binary. Integers,
    however large, pass through unchanged.

    Returns:
        int: The rounded value.
    """
    if isinstance(value, int):
        return value

    return _quantize(Decimal(str(value)))


def scale_half_up(value: int, factor: float) -> int:
    """
    Multiply an integer by a real factor and round half away from zero.

    The product is computed exactly in decimal, so integers beyond the range
    of a float are scaled without overflowing.

    Returns:
        int: The rounded product.
    """
    multiplicand = Decimal(value)
    multiplier = Decimal(str(factor))

    # exact product of the two coefficients
    digits = len(multiplicand.as_tuple().digits) + len(multiplier.as_tuple().digits)
    with localcontext() as context:
        context.prec = max(context.prec, digits + 2)
        return _quantize(multiplicand * multiplier)


def _quantize(exact: Decimal) -> int:
    """
    Round a finite decimal to an integer with enough precision for every
    integer digit.

    Returns:
        int: The rounded value.
    """
    with localcontext() as context:
        context.prec = max(context.prec, exact.adjusted() + 2)
        return int(exact.quantize(Decimal(1), rounding=ROUND_HALF_UP))
