"""Interfaces for the document renderer and the deck writer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from .models import Page, PlacementBox, RasterSurface


class DocumentSource(ABC):
    """Paginated document that can rasterize its pages.

    Page indices are 1-based. ``render`` is the blocking step of a job: it
    returns once the renderer has produced the pixels.
    """

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages in the document.

        Raises:
            RenderFailure: If the document cannot be opened.
        """

    @abstractmethod
    def page(self, index: int) -> Page:
        """Return page ``index`` with its intrinsic size in points."""

    @abstractmethod
    def render(self, page: Page, scale: float) -> RasterSurface:
        """Rasterize ``page`` at ``scale`` pixels per point.

        The surface measures ``round(width * scale) x round(height * scale)``.

        Raises:
            RenderFailure: If the page cannot be rendered.
        """


class DeckSink(ABC):
    """Presentation writer receiving finalized slides."""

    @abstractmethod
    def add_slide(self) -> Any:
        """Append a blank slide and return a handle for ``add_image``."""

    @abstractmethod
    def add_image(self, slide: Any, placement: PlacementBox, data: bytes) -> None:
        """Draw encoded image ``data`` on ``slide`` at ``placement`` (inches)."""

    @abstractmethod
    def save(self, output_path: Path) -> Path:
        """Write the presentation and return the delivered file path.

        Raises:
            SerializationFailure: If the file cannot be written.
        """


__all__ = ["DeckSink", "DocumentSource"]
