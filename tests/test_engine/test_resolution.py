"""Tests for the resolution resolver."""

import math

import pytest

from printsize.engine.resolution import resolve_dimensions
from printsize.engine.rounding import round_display, round_half_up
from printsize.errors import InvalidInputError

SAMPLE_MEGAPIXELS = [0.5, 1, 2.5, 12, 24, 24.2, 33, 45.7, 61, 102, 200]


def test_24_megapixels_is_6000_by_4000():
    """24 MP at 3:2 resolves to exactly 6000x4000."""
    dims = resolve_dimensions(24)
    assert (dims.width, dims.height) == (6000, 4000)


def test_accepts_int_and_float():
    """Integer and float megapixels give the same result."""
    assert resolve_dimensions(24) == resolve_dimensions(24.0)


@pytest.mark.parametrize("mp", SAMPLE_MEGAPIXELS)
def test_total_pixels_match_megapixels(mp):
    """width * height stays within integer rounding of mp * 1e6."""
    dims = resolve_dimensions(mp)
    assert dims.width > 0 and dims.height > 0
    assert abs(dims.width * dims.height - mp * 1_000_000) <= dims.width + dims.height


@pytest.mark.parametrize("mp", SAMPLE_MEGAPIXELS)
def test_aspect_ratio_is_three_to_two(mp):
    """width / height is 1.5 within rounding tolerance."""
    dims = resolve_dimensions(mp)
    assert abs(dims.width / dims.height - 1.5) <= 2 / dims.height


def test_aspect_tolerance_tightens_with_size():
    """Larger images deviate less from 3:2."""
    small = resolve_dimensions(1)
    large = resolve_dimensions(200)
    assert abs(large.aspect_ratio - 1.5) <= abs(small.aspect_ratio - 1.5)


def test_rounding_matches_formula():
    """Each side is sqrt(total * 1.5) and sqrt(total / 1.5), rounded."""
    dims = resolve_dimensions(45.7)
    total = 45.7 * 1_000_000
    assert dims.width == round_half_up(math.sqrt(total * 1.5))
    assert dims.height == round_half_up(math.sqrt(total / 1.5))


def test_idempotent():
    """Same input yields identical output."""
    assert resolve_dimensions(61) == resolve_dimensions(61)


@pytest.mark.parametrize("bad", [0, -1, -24.5, float("nan"), float("inf"), float("-inf")])
def test_invalid_megapixels_rejected(bad):
    """Zero, negative and non-finite values raise InvalidInputError."""
    with pytest.raises(InvalidInputError):
        resolve_dimensions(bad)


@pytest.mark.parametrize("bad", ["24", None, True])
def test_non_numeric_megapixels_rejected(bad):
    """Strings, None and booleans are not megapixel counts."""
    with pytest.raises(InvalidInputError):
        resolve_dimensions(bad)


def test_sub_pixel_megapixels_rejected():
    """A value too small to yield one pixel per side is rejected."""
    with pytest.raises(InvalidInputError):
        resolve_dimensions(1e-12)


@pytest.mark.parametrize("huge", [1e303, 1e308, 1.5e302])
def test_overflowing_megapixels_rejected(huge):
    """Values whose pixel total overflows raise InvalidInputError, not OverflowError."""
    with pytest.raises(InvalidInputError, match="too large"):
        resolve_dimensions(huge)


def test_very_large_megapixels_still_resolve():
    """Large values that stay finite still give a result."""
    dims = resolve_dimensions(1e300)
    assert dims.width > dims.height > 0


def test_invalid_input_is_value_error():
    """InvalidInputError can be caught as ValueError."""
    with pytest.raises(ValueError):
        resolve_dimensions(-5)


class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4

    def test_below_half_rounds_down(self):
        assert round_half_up(816.4966) == 816

    def test_display_one_decimal(self):
        assert round_display(33.86666) == 33.9
        assert round_display(50.8) == 50.8

    def test_display_half_rounds_up(self):
        assert round_display(0.25, 1) == 0.3

    def test_display_zero_decimals(self):
        assert round_display(101.6, 0) == 102
