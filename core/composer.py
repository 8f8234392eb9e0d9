"""
Slide accumulation module.

Collects one slide per processed page, in page order, and hands the
finished deck over for serialization exactly once.
"""
from __future__ import annotations

import io
import logging
from typing import List

from PIL import Image

try:
    from config.defaults import SLIDE_IMAGE_FORMAT
except ImportError:
    from ..config.defaults import SLIDE_IMAGE_FORMAT

from .models import OutputDeck, PlacementBox, Slide, SlideCanvas

logger = logging.getLogger(__name__)


def encode_image(image: Image.Image, fmt: str = SLIDE_IMAGE_FORMAT) -> bytes:
    """
    Encode a raster for embedding in a slide.

    Args:
        image: PIL Image to encode.
        fmt: Image format (default: PNG, lossless).

    Returns:
        Encoded image bytes.
    """
    image_stream = io.BytesIO()
    image.save(image_stream, format=fmt)
    return image_stream.getvalue()


class SlideComposer:
    """
    Append-only accumulator of slides for one job.

    Slides are numbered in the order they are appended. ``finalize``
    freezes the sequence into an ``OutputDeck``; the composer cannot be
    used afterwards.
    """

    def __init__(self, canvas: SlideCanvas):
        self.canvas = canvas
        self._slides: List[Slide] = []
        self._finalized = False

    def append_slide(self, image_data: bytes, placement: PlacementBox) -> Slide:
        """
        Append a slide with one placed image.

        Args:
            image_data: Encoded image bytes.
            placement: Image position and size on the slide (inches).

        Returns:
            The appended Slide.

        Raises:
            RuntimeError: If the deck was already finalized.
        """
        if self._finalized:
            raise RuntimeError("Deck already finalized; cannot append slides.")

        slide = Slide(
            index=len(self._slides) + 1,
            image_data=image_data,
            placement=placement,
        )
        self._slides.append(slide)
        logger.debug(f"Composed slide {slide.index}")
        return slide

    def finalize(self) -> OutputDeck:
        """
        Freeze the accumulated slides into a deck.

        Returns:
            OutputDeck with all slides in page order.

        Raises:
            RuntimeError: If called more than once.
        """
        if self._finalized:
            raise RuntimeError("Deck already finalized.")
        self._finalized = True
        deck = OutputDeck(canvas=self.canvas, slides=tuple(self._slides))
        self._slides = []
        return deck

    @property
    def slide_count(self) -> int:
        """Get the number of slides appended so far."""
        return len(self._slides)
