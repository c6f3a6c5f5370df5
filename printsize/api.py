"""Print size calculator REST API.

FastAPI server exposing the calculation engine to a browser front end.
All lengths are returned twice: full precision and rounded for display.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from printsize import __version__
from printsize.calculator import calculate_for
from printsize.config import Settings, get_settings
from printsize.errors import InvalidInputError, UnknownCameraError
from printsize.models import Camera, CalculationReport, PaperFormat, QualityTier, ReferenceData
from printsize.reference import default_reference_data, load_reference_data

logger = logging.getLogger(__name__)

app = FastAPI(title="Print Size Calculator API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ── Response Models ──────────────────────────────────────────────


class ResolutionResponse(BaseModel):
    width: int
    height: int
    megapixels: float


class PrintSizeResponse(BaseModel):
    """Maximum print size for one quality tier."""

    tier: str
    name: str
    dpi: int
    description: str
    width_cm: float
    height_cm: float
    display_width_cm: float
    display_height_cm: float


class CompatibilityRow(BaseModel):
    """One paper format with a fit flag per tier key."""

    format: str
    width_cm: float
    height_cm: float
    fits: dict[str, bool]


class CalculationResponse(BaseModel):
    megapixels: float
    camera: Optional[str] = None
    resolution: ResolutionResponse
    print_sizes: list[PrintSizeResponse]
    compatibility: list[CompatibilityRow]


# ── Dependencies ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_app_settings() -> Settings:
    """Settings dependency, built once per process and overridable in tests."""
    return get_settings()


@lru_cache(maxsize=8)
def load_reference_cached(path: Optional[str]) -> ReferenceData:
    """Load reference data once per file path; None means the built-in tables."""
    if not path:
        return default_reference_data()
    return load_reference_data(path)


def get_app_reference(settings: Settings = Depends(get_app_settings)) -> ReferenceData:
    """Reference data dependency, overridable in tests."""
    return load_reference_cached(settings.reference_data_path)


def _to_response(report: CalculationReport, decimals: int) -> CalculationResponse:
    print_sizes = []
    for size in report.print_sizes:
        display_w, display_h = size.display(decimals)
        print_sizes.append(PrintSizeResponse(
            tier=size.tier.key,
            name=size.tier.name,
            dpi=size.tier.dpi,
            description=size.tier.description,
            width_cm=size.width_cm,
            height_cm=size.height_cm,
            display_width_cm=display_w,
            display_height_cm=display_h,
        ))

    tier_keys = [size.tier.key for size in report.print_sizes]
    rows = [
        CompatibilityRow(
            format=row.format.name,
            width_cm=row.format.width_cm,
            height_cm=row.format.height_cm,
            fits=dict(zip(tier_keys, row.results)),
        )
        for row in report.compatibility
    ]

    return CalculationResponse(
        megapixels=report.megapixels,
        camera=report.camera,
        resolution=ResolutionResponse(
            width=report.dimensions.width,
            height=report.dimensions.height,
            megapixels=report.dimensions.megapixels,
        ),
        print_sizes=print_sizes,
        compatibility=rows,
    )


# ── Routes ───────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict:
    """Liveness check."""
    return {"status": "ok", "version": __version__}


@app.get("/cameras")
def list_cameras(reference: ReferenceData = Depends(get_app_reference)) -> list[Camera]:
    """Camera catalog sorted by name."""
    return reference.sorted_cameras()


@app.get("/quality-tiers")
def list_quality_tiers(reference: ReferenceData = Depends(get_app_reference)) -> list[QualityTier]:
    """Quality tiers in display order."""
    return list(reference.quality_tiers)


@app.get("/paper-formats")
def list_paper_formats(reference: ReferenceData = Depends(get_app_reference)) -> list[PaperFormat]:
    """Paper formats in display order."""
    return list(reference.paper_formats)


@app.get("/calculate")
def calculate_endpoint(
    camera: Optional[str] = Query(None, description="Camera name from /cameras"),
    megapixels: Optional[float] = Query(None, description="Custom megapixel value"),
    settings: Settings = Depends(get_app_settings),
    reference: ReferenceData = Depends(get_app_reference),
) -> CalculationResponse:
    """Compute resolution, max print size per tier and format compatibility.

    A camera takes precedence over a custom megapixel value. With neither,
    the configured default is used.
    """
    if not camera and megapixels is not None and not settings.megapixels_in_range(megapixels):
        raise HTTPException(
            status_code=422,
            detail=(
                f"megapixels must be between {settings.min_megapixels:g} "
                f"and {settings.max_megapixels:g}"
            ),
        )

    try:
        report = calculate_for(
            reference,
            camera=camera,
            megapixels=megapixels,
            default=settings.default_megapixels,
        )
    except UnknownCameraError as e:
        logger.warning("Calculate rejected: %s", e)
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        logger.warning("Calculate rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return _to_response(report, settings.display_decimals)


# ── CLI Entry Point ─────────────────────────────────────────────


def main():
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
