"""
Pytest configuration and fakes for the conversion pipeline.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest
from PIL import Image

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.errors import RenderFailure  # noqa: E402
from core.geometry import raster_size  # noqa: E402
from core.models import Page, PlacementBox, RasterSurface, SlideCanvas  # noqa: E402
from core.ports import DeckSink, DocumentSource  # noqa: E402

LETTER = (612.0, 792.0)
LETTER_LANDSCAPE = (792.0, 612.0)


class TrackedSurface(RasterSurface):
    """Raster surface that remembers whether the pipeline released it."""

    closed: bool = False

    def close(self) -> None:
        self.closed = True
        super().close()


class FakeDocumentSource(DocumentSource):
    """Document whose pages render to solid-color Pillow images."""

    def __init__(
        self,
        sizes: Sequence[Tuple[float, float]],
        fail_on: Optional[int] = None,
        error: Optional[Exception] = None,
    ):
        self.sizes = list(sizes)
        self.fail_on = fail_on
        self.error = error
        self.rendered: List[Tuple[int, float]] = []
        self.surfaces: List[RasterSurface] = []

    @property
    def page_count(self) -> int:
        return len(self.sizes)

    def page(self, index: int) -> Page:
        width, height = self.sizes[index - 1]
        return Page(index=index, width=width, height=height)

    def render(self, page: Page, scale: float) -> RasterSurface:
        self.rendered.append((page.index, scale))
        if page.index == self.fail_on:
            raise self.error or RenderFailure(page.index, "corrupt page")
        width, height = raster_size(page, scale)
        surface = TrackedSurface(
            width=width,
            height=height,
            image=Image.new("RGB", (width, height), (page.index * 20 % 256, 80, 160)),
        )
        self.surfaces.append(surface)
        return surface


class FakeDeckSink(DeckSink):
    """Records deck writer calls instead of producing a file."""

    def __init__(self, fail_on_save: Optional[Exception] = None):
        self.fail_on_save = fail_on_save
        self.slides: List[Dict[str, object]] = []
        self.saved: List[Path] = []

    def add_slide(self):
        slide = {"images": []}
        self.slides.append(slide)
        return slide

    def add_image(self, slide, placement: PlacementBox, data: bytes) -> None:
        slide["images"].append((placement, data))

    def save(self, output_path: Path) -> Path:
        if self.fail_on_save is not None:
            raise self.fail_on_save
        self.saved.append(Path(output_path))
        return Path(output_path)

    @property
    def placements(self) -> List[PlacementBox]:
        return [placement for slide in self.slides for placement, _ in slide["images"]]


@pytest.fixture
def canvas() -> SlideCanvas:
    return SlideCanvas(width=10, height=5.625, dpi=96)


@pytest.fixture
def sink() -> FakeDeckSink:
    return FakeDeckSink()
