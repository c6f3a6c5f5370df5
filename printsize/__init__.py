"""Print size calculator: maximum print dimensions from a camera's megapixels."""

__version__ = "0.1.0"
