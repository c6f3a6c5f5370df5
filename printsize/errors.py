"""Exception types raised by the print size calculator."""

from __future__ import annotations


class PrintSizeError(Exception):
    """Base class for all calculator errors."""


class InvalidInputError(PrintSizeError, ValueError):
    """A megapixel, pixel or DPI value outside its valid domain."""


class UnknownCameraError(PrintSizeError, LookupError):
    """Camera name not present in the reference catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown camera: '{name}'")
        self.name = name


class ReferenceDataError(PrintSizeError):
    """Reference data file could not be parsed or validated."""
