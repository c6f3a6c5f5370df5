"""Print size calculator Pydantic models.

Immutable value objects passed between the engine stages and the
reference data. All models are frozen; a new instance is built on
every calculation.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from printsize.engine.rounding import round_display
from printsize.errors import UnknownCameraError


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Camera(_Frozen):
    """A camera model from the reference catalog."""

    name: str = Field(..., min_length=1)
    brand: str = ""
    megapixels: float = Field(..., gt=0)


class QualityTier(_Frozen):
    """A named DPI threshold for a print quality class."""

    key: str = Field(..., min_length=1, description="e.g. 'excellent'")
    name: str
    dpi: int = Field(..., gt=0)
    description: str = ""


class PaperFormat(_Frozen):
    """A standard print format in centimeters."""

    name: str = Field(..., min_length=1, description="e.g. '30x40'")
    width_cm: float = Field(..., gt=0)
    height_cm: float = Field(..., gt=0)


class PixelDimensions(_Frozen):
    """Pixel width and height of an image."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @property
    def total_pixels(self) -> int:
        return self.width * self.height

    @property
    def megapixels(self) -> float:
        return self.total_pixels / 1_000_000

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


class PrintSize(_Frozen):
    """Maximum print size at one DPI, kept at full precision."""

    width_cm: float
    height_cm: float
    tier: Optional[QualityTier] = None

    def display(self, decimals: int = 1) -> tuple[float, float]:
        """Return (width, height) rounded for presentation only."""
        return round_display(self.width_cm, decimals), round_display(self.height_cm, decimals)


class FormatCompatibility(_Frozen):
    """Fit results for one paper format, one boolean per quality tier."""

    format: PaperFormat
    results: tuple[bool, ...]


class ReferenceData(_Frozen):
    """Camera catalog, quality tiers and paper formats fed to the engine."""

    cameras: tuple[Camera, ...] = ()
    quality_tiers: tuple[QualityTier, ...] = ()
    paper_formats: tuple[PaperFormat, ...] = ()

    @field_validator("cameras")
    @classmethod
    def validate_unique_cameras(cls, v: tuple[Camera, ...]) -> tuple[Camera, ...]:
        """Ensure camera names are unique."""
        seen: set[str] = set()
        for camera in v:
            if camera.name in seen:
                raise ValueError(f"duplicate camera name '{camera.name}'")
            seen.add(camera.name)
        return v

    @field_validator("quality_tiers")
    @classmethod
    def validate_unique_tier_keys(cls, v: tuple[QualityTier, ...]) -> tuple[QualityTier, ...]:
        """Ensure tier keys are unique."""
        keys = [tier.key for tier in v]
        if len(keys) != len(set(keys)):
            raise ValueError(f"duplicate quality tier keys in {keys}")
        return v

    def camera(self, name: str) -> Camera:
        """Look up a camera by exact name.

        Raises:
            UnknownCameraError: If the name is not in the catalog.
        """
        for camera in self.cameras:
            if camera.name == name:
                return camera
        raise UnknownCameraError(name)

    def sorted_cameras(self) -> list[Camera]:
        """Return cameras ordered by name, as shown in a picker."""
        return sorted(self.cameras, key=lambda c: c.name)


class CalculationReport(_Frozen):
    """Everything computed for one megapixel value."""

    megapixels: float
    camera: Optional[str] = None
    dimensions: PixelDimensions
    print_sizes: tuple[PrintSize, ...]
    compatibility: tuple[FormatCompatibility, ...]
