# _utils/test_rounding.py

import pytest

from backoff_timeout.domain._utils import round_half_up, scale_half_up

pytestmark = pytest.mark.unit


def test_rounds_half_away_from_zero() -> None:
    """
    ARRANGE: value exactly halfway between two integers
    ACT:     round_half_up
    ASSERT:  rounds up
    """
    assert round_half_up(2.5) == 3


def test_rounds_down_below_half() -> None:
    """
    ARRANGE: 100 * 1.25 ** 2 (156.25)
    ACT:     round_half_up
    ASSERT:  returns 156
    """
    assert round_half_up(100 * 1.25**2) == 156


def test_absorbs_binary_float_noise() -> None:
    """
    ARRANGE: 100 * 1.1, stored as 110.00000000000001
    ACT:     round_half_up
    ASSERT:  returns 110
    """
    assert round_half_up(100 * 1.1) == 110


def test_passes_integers_through() -> None:
    """
    ARRANGE: an integer value
    ACT:     round_half_up
    ASSERT:  returns the same integer
    """
    assert round_half_up(100) == 100


def test_rounds_values_beyond_default_decimal_precision() -> None:
    """
    ARRANGE: float 1.5e30, with more than 28 integer digits
    ACT:     round_half_up
    ASSERT:  returns 15 * 10 ** 29, the value as it reads
    """
    assert round_half_up(1.5e30) == 15 * 10**29


def test_passes_large_integers_through() -> None:
    """
    ARRANGE: integer with 400 digits
    ACT:     round_half_up
    ASSERT:  returns the same integer
    """
    value = 10**400

    assert round_half_up(value) == value


def test_scale_half_up_rounds_product() -> None:
    """
    ARRANGE: 156 scaled by 1.1 (171.6)
    ACT:     scale_half_up
    ASSERT:  returns 172
    """
    assert scale_half_up(156, 1.1) == 172


def test_scale_half_up_handles_integers_beyond_float_range() -> None:
    """
    ARRANGE: 10 ** 400 scaled by 1.5
    ACT:     scale_half_up
    ASSERT:  returns 15 * 10 ** 399 exactly
    """
    assert scale_half_up(10**400, 1.5) == 15 * 10**399
