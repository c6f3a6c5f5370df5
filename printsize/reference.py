"""Reference tables: camera catalog, quality tiers and paper formats.

The built-in tables are plain constants. The engine never reads them
directly; callers pass a ReferenceData instance so tests and deployments
can substitute their own tables (see load_reference_data).

JSON file shape:
    {
      "cameras": [{"name": "...", "brand": "...", "megapixels": 24.2}],
      "quality_tiers": [{"key": "...", "name": "...", "dpi": 300, "description": "..."}],
      "paper_formats": [{"name": "30x40", "width_cm": 30, "height_cm": 40}]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from printsize.config import Settings
from printsize.errors import ReferenceDataError
from printsize.models import Camera, PaperFormat, QualityTier, ReferenceData

logger = logging.getLogger(__name__)

# ── Camera Catalog ───────────────────────────────────────────────────────
# name → (brand, megapixels)

CAMERAS: dict[str, tuple[str, float]] = {
    # Canon
    "Canon EOS R5": ("Canon", 45),
    "Canon EOS R6 II": ("Canon", 24.2),
    "Canon EOS R8": ("Canon", 24.2),
    "Canon EOS R7": ("Canon", 32.5),
    "Canon EOS 5D Mark IV": ("Canon", 30.4),
    # Sony
    "Sony A7R V": ("Sony", 61),
    "Sony A7 IV": ("Sony", 33),
    "Sony A7C II": ("Sony", 33),
    "Sony A6700": ("Sony", 26),
    # Nikon
    "Nikon Z8": ("Nikon", 45.7),
    "Nikon Z6 III": ("Nikon", 24.5),
    "Nikon Z5": ("Nikon", 24.3),
    "Nikon D850": ("Nikon", 45.7),
    # Fujifilm
    "Fujifilm X-T5": ("Fujifilm", 40.2),
    "Fujifilm X-H2": ("Fujifilm", 40.2),
    "Fujifilm GFX 100S": ("Fujifilm", 102),
    # Smartphones
    "iPhone 15 Pro Max": ("Apple", 48),
    "iPhone 15 Pro": ("Apple", 48),
    "iPhone 15": ("Apple", 48),
    "iPhone 14 Pro": ("Apple", 48),
    "Samsung Galaxy S24 Ultra": ("Samsung", 200),
    "Samsung Galaxy S24": ("Samsung", 50),
    "Google Pixel 8 Pro": ("Google", 50),
}

# ── Quality Tiers (highest DPI first) ────────────────────────────────────

QUALITY_TIERS = [
    {"key": "excellent", "name": "Excellent", "dpi": 300,
     "description": "Professional quality, close viewing"},
    {"key": "very_good", "name": "Very good", "dpi": 240,
     "description": "Photo books, standard prints"},
    {"key": "good", "name": "Good", "dpi": 150,
     "description": "Posters, medium viewing distance"},
    {"key": "acceptable", "name": "Acceptable", "dpi": 100,
     "description": "Large formats, viewed from afar"},
]

# ── Paper Formats (cm, width × height) ──────────────────────────────────

PAPER_FORMATS = [
    ("10x15", 10, 15),
    ("13x18", 13, 18),
    ("20x30", 20, 30),
    ("30x40", 30, 40),
    ("40x60", 40, 60),
    ("50x70", 50, 70),
    ("60x90", 60, 90),
    ("70x100", 70, 100),
]


def default_reference_data() -> ReferenceData:
    """Build ReferenceData from the built-in tables."""
    return ReferenceData(
        cameras=tuple(
            Camera(name=name, brand=brand, megapixels=mp)
            for name, (brand, mp) in CAMERAS.items()
        ),
        quality_tiers=tuple(QualityTier(**tier) for tier in QUALITY_TIERS),
        paper_formats=tuple(
            PaperFormat(name=name, width_cm=w, height_cm=h)
            for name, w, h in PAPER_FORMATS
        ),
    )


def load_reference_data(path: str | Path) -> ReferenceData:
    """Load reference tables from a JSON file.

    Args:
        path: JSON file in the shape documented at module level.

    Returns:
        Validated ReferenceData.

    Raises:
        FileNotFoundError: If the file does not exist.
        ReferenceDataError: If the file is not valid JSON or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Reference data not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        data = ReferenceData.model_validate(raw)
    except json.JSONDecodeError as e:
        raise ReferenceDataError(f"Invalid JSON in {path}: {e}") from e
    except ValidationError as e:
        raise ReferenceDataError(f"Invalid reference data in {path}: {e}") from e

    logger.info(
        "Loaded reference data from %s: %d cameras, %d tiers, %d formats",
        path, len(data.cameras), len(data.quality_tiers), len(data.paper_formats),
    )
    return data


def get_reference_data(settings: Optional[Settings] = None) -> ReferenceData:
    """Return the configured reference data, falling back to the built-in tables."""
    if settings is not None and settings.reference_data_path_resolved is not None:
        return load_reference_data(settings.reference_data_path_resolved)
    return default_reference_data()
