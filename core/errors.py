"""
Conversion error taxonomy.

Every failure that ends a conversion job is one of these. None of them is
retried; the job stops at the first one and reports its message.
"""
from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """Base class for failures that terminate a conversion job."""


class InvalidPageGeometry(ConversionError):
    """A page size is non-positive or too small to rasterize."""

    def __init__(self, page_index: int, width: float, height: float):
        self.page_index = page_index
        self.width = width
        self.height = height
        super().__init__(
            f"Page {page_index} has invalid size {width} x {height} pt"
        )


class RenderFailure(ConversionError):
    """The renderer could not produce a raster for a page or open the document."""

    def __init__(self, page_index: Optional[int], reason: str):
        self.page_index = page_index
        self.reason = reason
        if page_index is None:
            message = f"Could not open document: {reason}"
        else:
            message = f"Failed to render page {page_index}: {reason}"
        super().__init__(message)


class SerializationFailure(ConversionError):
    """The deck writer could not build or save the presentation."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to save presentation: {reason}")
