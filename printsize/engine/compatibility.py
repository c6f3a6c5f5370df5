"""Format compatibility checker.

A paper format fits a tier's maximum print size when it fits in either
orientation:

    landscape = fmt.width <= max.width and fmt.height <= max.height
    portrait  = fmt.height <= max.width and fmt.width <= max.height

Equality counts as a fit. Comparisons always use the unrounded sizes.
"""

from __future__ import annotations

from typing import Sequence

from printsize.models import FormatCompatibility, PaperFormat, PrintSize


def fits_landscape(fmt: PaperFormat, max_size: PrintSize) -> bool:
    return fmt.width_cm <= max_size.width_cm and fmt.height_cm <= max_size.height_cm


def fits_portrait(fmt: PaperFormat, max_size: PrintSize) -> bool:
    return fmt.height_cm <= max_size.width_cm and fmt.width_cm <= max_size.height_cm


def fits(fmt: PaperFormat, max_size: PrintSize) -> bool:
    """Check whether a format fits a maximum print size in some orientation."""
    return fits_landscape(fmt, max_size) or fits_portrait(fmt, max_size)


def check_compatibility(
    max_sizes_by_tier: Sequence[PrintSize],
    formats: Sequence[PaperFormat],
) -> list[FormatCompatibility]:
    """Build the format × tier fit matrix.

    Args:
        max_sizes_by_tier: Full-precision print sizes, one per tier, in tier order.
        formats: Paper formats to check, in display order.

    Returns:
        One FormatCompatibility per format (formats outer), each holding
        one boolean per tier (tiers inner). Every pair is evaluated.
    """
    matrix = []
    for fmt in formats:
        results = tuple(fits(fmt, size) for size in max_sizes_by_tier)
        matrix.append(FormatCompatibility(format=fmt, results=results))
    return matrix
