"""Resolution resolver: megapixels to 3:2 pixel dimensions.

Formula:
    total = megapixels * 1,000,000
    width = round(sqrt(total * 1.5))
    height = round(sqrt(total / 1.5))

width * height stays within rounding of total because
sqrt(total * r) * sqrt(total / r) == total.
"""

from __future__ import annotations

import math
import numbers

from printsize.engine.rounding import round_half_up
from printsize.errors import InvalidInputError
from printsize.models import PixelDimensions

ASPECT_RATIO = 1.5  # 3:2, width over height
PIXELS_PER_MEGAPIXEL = 1_000_000


def validate_megapixels(megapixels: float) -> float:
    """Return megapixels as a float, or raise if it is not a positive finite number."""
    if isinstance(megapixels, bool) or not isinstance(megapixels, numbers.Real):
        raise InvalidInputError(f"megapixels must be a number, got {megapixels!r}")
    value = float(megapixels)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(f"megapixels must be positive and finite, got {megapixels!r}")
    return value


def resolve_dimensions(megapixels: float) -> PixelDimensions:
    """Convert a megapixel count to pixel width and height at 3:2.

    Args:
        megapixels: Total captured pixels in millions, > 0.

    Returns:
        PixelDimensions rounded half-up to whole pixels.

    Raises:
        InvalidInputError: If megapixels is not positive and finite, or
            so large that the pixel total overflows.
    """
    total = validate_megapixels(megapixels) * PIXELS_PER_MEGAPIXEL
    scaled_width = total * ASPECT_RATIO
    # Huge finite inputs overflow to inf before the square root
    if not math.isfinite(total) or not math.isfinite(scaled_width):
        raise InvalidInputError(f"megapixels too large to compute: {megapixels!r}")
    width = round_half_up(math.sqrt(scaled_width))
    height = round_half_up(math.sqrt(total / ASPECT_RATIO))
    # Sub-pixel inputs would round to zero
    if width < 1 or height < 1:
        raise InvalidInputError(f"megapixels too small to form an image: {megapixels!r}")
    return PixelDimensions(width=width, height=height)
