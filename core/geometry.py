"""
Slide geometry utilities.

Derives the render scale for each page from the slide canvas and fits
rendered rasters onto the canvas while preserving their aspect ratio.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple

try:
    from config.defaults import PLACEMENT_DECIMALS
except ImportError:
    from ..config.defaults import PLACEMENT_DECIMALS

from .errors import InvalidPageGeometry
from .models import Page, PlacementBox, SlideCanvas


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round to a fixed number of decimal places, halves away from zero.

    Python's built-in ``round`` uses banker's rounding, which would place
    2.825 at 2.82; placements need 2.83.

    Args:
        value: Value to round.
        places: Number of decimal places (default: 0).

    Returns:
        Rounded value as float.

    Example:
        >>> round_half_up(2.825, 2)
        2.83
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def target_pixel_width(slide_width: float, dpi: int) -> int:
    """
    Calculate the raster width that fills the slide width.

    Args:
        slide_width: Slide width in inches.
        dpi: Pixels per inch.

    Returns:
        Target width in pixels.

    Example:
        >>> target_pixel_width(10, 96)
        960
    """
    return int(round_half_up(slide_width * dpi))


def scale_for(page: Page, target_width: int) -> float:
    """
    Calculate the render scale that maps a page onto the target width.

    Args:
        page: Source page (size in points).
        target_width: Target raster width in pixels.

    Returns:
        Scale factor (pixels per point).

    Raises:
        InvalidPageGeometry: If the page has a non-positive size, or if
            either side would render smaller than one pixel.
    """
    if page.width <= 0 or page.height <= 0:
        raise InvalidPageGeometry(page.index, page.width, page.height)
    scale = target_width / page.width
    if min(raster_size(page, scale)) < 1:
        raise InvalidPageGeometry(page.index, page.width, page.height)
    return scale


def raster_size(page: Page, scale: float) -> Tuple[int, int]:
    """
    Pixel dimensions of a page rendered at ``scale``.

    Args:
        page: Source page.
        scale: Render scale from ``scale_for``.

    Returns:
        Tuple of (width_px, height_px).
    """
    return (
        int(round_half_up(page.width * scale)),
        int(round_half_up(page.height * scale)),
    )


def px_to_inches(pixels: int, dpi: int) -> float:
    """Convert pixels to inches at the given DPI."""
    return pixels / dpi


def get_aspect_ratio(width: float, height: float) -> float:
    """
    Calculate aspect ratio (width / height).

    Args:
        width: Width value.
        height: Height value.

    Returns:
        Aspect ratio as float.

    Raises:
        ValueError: If height is zero.
    """
    if height == 0:
        raise ValueError("Height cannot be zero")
    return width / height


def plan_placement(
    pixel_width: int,
    pixel_height: int,
    canvas: SlideCanvas
) -> PlacementBox:
    """
    Fit a raster inside the slide, centered, keeping its aspect ratio.

    A raster relatively wider than the slide spans the full slide width and
    is centered vertically; otherwise (equal ratios included) it spans the
    full height and is centered horizontally. Computed values are rounded
    half-up to ``PLACEMENT_DECIMALS``; the side matching the canvas keeps
    the canvas value unchanged. The fitted side never drops below one
    hundredth of an inch.

    Args:
        pixel_width: Raster width in pixels.
        pixel_height: Raster height in pixels.
        canvas: Slide canvas (inches and DPI).

    Returns:
        PlacementBox in inches.

    Example:
        >>> plan_placement(960, 1243, SlideCanvas(10, 5.625, 96))
        PlacementBox(x=2.83, y=0.0, width=4.34, height=5.625)
    """
    image_width = px_to_inches(pixel_width, canvas.dpi)
    image_height = px_to_inches(pixel_height, canvas.dpi)

    image_ratio = get_aspect_ratio(image_width, image_height)
    slide_ratio = canvas.ratio

    # A sliver raster still gets a visible, non-empty box
    min_side = 10 ** -PLACEMENT_DECIMALS
    if image_ratio > slide_ratio:
        # Relatively wider: fit to slide width
        width = canvas.width
        height = max(round_half_up(canvas.width / image_ratio, PLACEMENT_DECIMALS), min_side)
        x = 0.0
        y = round_half_up((canvas.height - canvas.width / image_ratio) / 2, PLACEMENT_DECIMALS)
    else:
        # Relatively taller (or equal): fit to slide height
        height = canvas.height
        width = max(round_half_up(canvas.height * image_ratio, PLACEMENT_DECIMALS), min_side)
        y = 0.0
        x = round_half_up((canvas.width - canvas.height * image_ratio) / 2, PLACEMENT_DECIMALS)

    return PlacementBox(x=max(x, 0.0), y=max(y, 0.0), width=width, height=height)
