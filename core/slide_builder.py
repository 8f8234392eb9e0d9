"""
PowerPoint deck writing module.

Creates PPTX files with one positioned picture per slide from a
finalized OutputDeck.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from pptx import Presentation
from pptx.util import Inches

from .errors import SerializationFailure
from .models import OutputDeck, PlacementBox, SlideCanvas
from .ports import DeckSink

logger = logging.getLogger(__name__)


class SlideBuilder(DeckSink):
    """
    Builds PowerPoint presentations from placed slide images.

    Slide size is taken from the canvas; every slide uses a blank layout
    and carries a single picture at its placement box.
    """

    def __init__(self, canvas: SlideCanvas):
        """
        Initialize the slide builder.

        Args:
            canvas: Slide canvas defining the presentation size in inches.
        """
        self.canvas = canvas
        self.prs: Optional[Presentation] = None
        logger.info(f"SlideBuilder initialized: {canvas.width} x {canvas.height} in")

    def create_presentation(self) -> None:
        """Initialize a new presentation sized to the canvas."""
        self.prs = Presentation()
        self.prs.slide_width = Inches(self.canvas.width)
        self.prs.slide_height = Inches(self.canvas.height)

        logger.info(
            f"Presentation created: {self.canvas.width} x {self.canvas.height} in "
            f"-> {self.prs.slide_width} x {self.prs.slide_height} EMU"
        )

    def add_slide(self):
        """
        Append a blank slide.

        Returns:
            The new python-pptx slide.
        """
        if self.prs is None:
            self.create_presentation()

        slide_layout = self._get_blank_layout()
        return self.prs.slides.add_slide(slide_layout)

    def add_image(self, slide, placement: PlacementBox, data: bytes) -> None:
        """
        Add a picture to the slide.

        Args:
            slide: Slide returned by ``add_slide``.
            placement: Position and size in inches.
            data: Encoded image bytes.
        """
        slide.shapes.add_picture(
            io.BytesIO(data),
            Inches(placement.x),
            Inches(placement.y),
            Inches(placement.width),
            Inches(placement.height),
        )

    def _get_blank_layout(self):
        """
        Get a blank slide layout.

        Tries index 6 first (standard blank), falls back to last layout.

        Returns:
            Slide layout object.
        """
        try:
            # Standard blank layout is usually at index 6
            if len(self.prs.slide_layouts) > 6:
                return self.prs.slide_layouts[6]
            else:
                # Fallback to last layout
                return self.prs.slide_layouts[-1]
        except IndexError:
            # Ultimate fallback: first layout
            return self.prs.slide_layouts[0]

    def save(self, output_path: Path) -> Path:
        """
        Save the presentation to a file.

        Args:
            output_path: Path to save the PPTX file.

        Returns:
            The saved file path.

        Raises:
            SerializationFailure: If the file cannot be written.
        """
        if self.prs is None:
            self.create_presentation()

        output_path = Path(output_path)
        try:
            self.prs.save(str(output_path))
            logger.info(f"Presentation saved to: {output_path}")
        except Exception as e:
            logger.error(f"Failed to save presentation: {e}")
            raise SerializationFailure(str(e)) from e
        return output_path

    @property
    def slide_count(self) -> int:
        """Get the number of slides in the presentation."""
        if self.prs is None:
            return 0
        return len(self.prs.slides)


def write_deck(deck: OutputDeck, sink: DeckSink, output_path: Path) -> Path:
    """
    Serialize a finalized deck through a deck sink.

    Args:
        deck: Finalized slides.
        sink: Presentation writer.
        output_path: Destination file path.

    Returns:
        Path of the delivered file.

    Raises:
        SerializationFailure: If the sink fails at any step.
    """
    try:
        for slide in deck:
            handle = sink.add_slide()
            sink.add_image(handle, slide.placement, slide.image_data)
        return sink.save(output_path)
    except SerializationFailure:
        raise
    except Exception as e:
        raise SerializationFailure(str(e) or type(e).__name__) from e
