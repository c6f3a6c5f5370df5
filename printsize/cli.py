"""Command-line report for the print size calculator.

Usage:
    printsize --camera "Sony A7R V"
    printsize --megapixels 24
    printsize --list-cameras
    printsize --reference my_tables.json --megapixels 45
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from printsize.calculator import calculate_for
from printsize.config import get_settings
from printsize.errors import InvalidInputError, ReferenceDataError, UnknownCameraError
from printsize.models import CalculationReport, ReferenceData
from printsize.reference import get_reference_data, load_reference_data

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="printsize",
        description="Estimate the largest print size for a camera or megapixel count.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--camera", help="Camera name from the catalog")
    source.add_argument("--megapixels", type=float, help="Custom megapixel value")
    parser.add_argument("--reference", help="JSON file with cameras, tiers and formats")
    parser.add_argument("--list-cameras", action="store_true", help="List known cameras and exit")
    return parser


def format_report(report: CalculationReport, decimals: int = 1) -> str:
    """Render a report as plain text."""
    lines = []
    source = f"{report.camera} " if report.camera else ""
    lines.append(f"{source}({report.megapixels:g} MP)")
    lines.append(f"Resolution: {report.dimensions.width:,} x {report.dimensions.height:,} px")

    lines.append("")
    lines.append("Maximum print sizes:")
    for size in report.print_sizes:
        w, h = size.display(decimals)
        lines.append(f"  {size.tier.name:<12} {size.tier.dpi:>4} DPI  {w:g} x {h:g} cm")

    if report.compatibility:
        lines.append("")
        header = "  Format    " + "".join(f"{s.tier.dpi:>6}" for s in report.print_sizes)
        lines.append(header)
        for row in report.compatibility:
            cells = "".join(f"{'OK' if ok else 'No':>6}" for ok in row.results)
            lines.append(f"  {row.format.name + ' cm':<10}{cells}")

    return "\n".join(lines)


def format_camera_list(reference: ReferenceData) -> str:
    return "\n".join(f"{c.name} ({c.megapixels:g} MP)" for c in reference.sorted_cameras())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        if args.reference:
            reference = load_reference_data(args.reference)
        else:
            reference = get_reference_data(settings)
    except (FileNotFoundError, ReferenceDataError) as e:
        logger.error("Cannot load reference data: %s", e)
        return 2

    if args.list_cameras:
        print(format_camera_list(reference))
        return 0

    if args.megapixels is not None and not settings.megapixels_in_range(args.megapixels):
        logger.warning(
            "megapixels %g outside %g-%g",
            args.megapixels, settings.min_megapixels, settings.max_megapixels,
        )
        return 2

    try:
        report = calculate_for(
            reference,
            camera=args.camera,
            megapixels=args.megapixels,
            default=settings.default_megapixels,
        )
    except (UnknownCameraError, InvalidInputError) as e:
        logger.warning("%s", e)
        return 2

    print(format_report(report, settings.display_decimals))
    return 0


if __name__ == "__main__":
    sys.exit(main())
