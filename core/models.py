"""
Data model for the page-to-slide pipeline.

Units:
- Page sizes are PDF points (1/72 inch).
- Canvas sizes and placements are inches.
- Raster sizes are pixels.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Tuple

from PIL import Image

try:
    from config.defaults import DEFAULT_DPI, DEFAULT_SLIDE_HEIGHT_IN, DEFAULT_SLIDE_WIDTH_IN
except ImportError:
    from ..config.defaults import DEFAULT_DPI, DEFAULT_SLIDE_HEIGHT_IN, DEFAULT_SLIDE_WIDTH_IN


@dataclass(frozen=True)
class Page:
    """One source page with its intrinsic size in points."""

    index: int
    width: float
    height: float


@dataclass(frozen=True)
class SlideCanvas:
    """Fixed slide size (inches) and raster resolution for a whole job."""

    width: float = DEFAULT_SLIDE_WIDTH_IN
    height: float = DEFAULT_SLIDE_HEIGHT_IN
    dpi: int = DEFAULT_DPI

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Slide size must be positive, got {self.width} x {self.height}"
            )
        if self.dpi <= 0:
            raise ValueError(f"DPI must be positive, got {self.dpi}")

    @property
    def ratio(self) -> float:
        """Slide aspect ratio (width / height)."""
        return self.width / self.height


@dataclass
class RasterSurface:
    """Pixels rendered for one page. Owned by the pipeline until encoded."""

    width: int
    height: int
    image: Image.Image

    def close(self) -> None:
        """Release the pixel buffer."""
        self.image.close()


@dataclass(frozen=True)
class PlacementBox:
    """Where an image is drawn on a slide, in inches."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Right edge coordinate."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge coordinate."""
        return self.y + self.height

    @property
    def ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class Slide:
    """A slide holding exactly one placed image."""

    index: int
    image_data: bytes = field(repr=False)
    placement: PlacementBox


@dataclass(frozen=True)
class OutputDeck:
    """Finalized, ordered slides ready for serialization."""

    canvas: SlideCanvas
    slides: Tuple[Slide, ...] = ()

    def __len__(self) -> int:
        return len(self.slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)


class JobStatus(enum.Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.SUCCEEDED, JobStatus.FAILED)


@dataclass
class ConversionJob:
    """Mutable state of one conversion attempt."""

    document_name: str
    canvas: SlideCanvas
    status: JobStatus = JobStatus.PENDING
    progress: int = 0
    error: Optional[str] = None
    failure: Optional[Exception] = field(default=None, repr=False)
    artifact_path: Optional[Path] = None
    slide_count: int = 0


@dataclass(frozen=True)
class ProgressEvent:
    """Completion percentage emitted while a job runs."""

    percent: int
    page: Optional[int] = None
    total: Optional[int] = None


@dataclass(frozen=True)
class JobOutcome:
    """Terminal event of a job."""

    status: JobStatus
    artifact_name: Optional[str] = None
    artifact_path: Optional[Path] = None
    error: Optional[str] = None
    slide_count: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status is JobStatus.SUCCEEDED
