"""Print-size estimator: pixel dimensions and DPI to centimeters."""

from __future__ import annotations

import numbers
from typing import Sequence

from printsize.errors import InvalidInputError
from printsize.models import PixelDimensions, PrintSize, QualityTier

CM_PER_INCH = 2.54


def _require_positive_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidInputError(f"{name} must be a positive integer, got {value!r}")


def estimate_print_size(width: int, height: int, dpi: int) -> PrintSize:
    """Compute the largest print for the given pixels at one DPI.

    Lengths are (pixels / dpi) * 2.54 in centimeters, unrounded.

    Raises:
        InvalidInputError: If any argument is not a positive integer.
    """
    _require_positive_int("width", width)
    _require_positive_int("height", height)
    _require_positive_int("dpi", dpi)
    return PrintSize(
        width_cm=(width / dpi) * CM_PER_INCH,
        height_cm=(height / dpi) * CM_PER_INCH,
    )


def estimate_print_sizes(
    dimensions: PixelDimensions,
    tiers: Sequence[QualityTier],
) -> list[PrintSize]:
    """Estimate one print size per quality tier, in tier order."""
    sizes = []
    for tier in tiers:
        size = estimate_print_size(dimensions.width, dimensions.height, tier.dpi)
        sizes.append(size.model_copy(update={"tier": tier}))
    return sizes
