"""Calculation pipeline tying the engine stages together.

megapixels → resolve_dimensions → estimate_print_sizes → check_compatibility

Each call recomputes everything from its inputs; nothing is cached.
"""

from __future__ import annotations

import logging
from typing import Optional

from printsize.config import get_settings
from printsize.engine.compatibility import check_compatibility
from printsize.engine.print_size import estimate_print_sizes
from printsize.engine.resolution import resolve_dimensions, validate_megapixels
from printsize.models import CalculationReport, ReferenceData

logger = logging.getLogger(__name__)


def resolve_megapixels(
    reference: ReferenceData,
    camera: Optional[str] = None,
    megapixels: Optional[float] = None,
    default: Optional[float] = None,
) -> float:
    """Pick the effective megapixel value.

    A selected camera takes precedence over a custom value. With neither,
    `default` is used (the configured default_megapixels when omitted).

    Raises:
        UnknownCameraError: If camera is not in the catalog.
        InvalidInputError: If the resulting value is not positive and finite.
    """
    if camera:
        return reference.camera(camera).megapixels
    if megapixels is not None:
        return validate_megapixels(megapixels)
    if default is None:
        default = get_settings().default_megapixels
    return validate_megapixels(default)


def calculate(
    megapixels: float,
    reference: ReferenceData,
    camera: Optional[str] = None,
) -> CalculationReport:
    """Run all three stages for one megapixel value.

    Args:
        megapixels: Effective megapixel count, > 0.
        reference: Quality tiers and paper formats to evaluate.
        camera: Camera name the value came from, recorded on the report.

    Returns:
        CalculationReport with full-precision print sizes.
    """
    dimensions = resolve_dimensions(megapixels)
    sizes = estimate_print_sizes(dimensions, reference.quality_tiers)
    compatibility = check_compatibility(sizes, reference.paper_formats)

    logger.debug(
        "Calculated %s MP -> %dx%d px, %d tiers, %d formats",
        megapixels, dimensions.width, dimensions.height,
        len(sizes), len(compatibility),
    )
    return CalculationReport(
        megapixels=megapixels,
        camera=camera,
        dimensions=dimensions,
        print_sizes=tuple(sizes),
        compatibility=tuple(compatibility),
    )


def calculate_for(
    reference: ReferenceData,
    camera: Optional[str] = None,
    megapixels: Optional[float] = None,
    default: Optional[float] = None,
) -> CalculationReport:
    """Resolve the megapixel source, then calculate."""
    value = resolve_megapixels(reference, camera=camera, megapixels=megapixels, default=default)
    return calculate(value, reference, camera=camera or None)
