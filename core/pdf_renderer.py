"""
PDF page rasterization module.

Renders single PDF pages to PIL images with Poppler (via pdf2image)
at the exact pixel size requested by the pipeline.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pdf2image import convert_from_path, pdfinfo_from_path
from pdf2image.exceptions import (
    PDFInfoNotInstalledError,
    PDFPageCountError,
    PDFPopplerTimeoutError,
    PDFSyntaxError,
)
from PIL import Image

from .errors import RenderFailure
from .geometry import raster_size
from .models import Page, RasterSurface
from .ports import DocumentSource

logger = logging.getLogger(__name__)

# pdfinfo -f/-l output keys, e.g. "Page    3 size" / "Page    3 rot"
_PAGE_FIELD = re.compile(r"^Page\s+(\d+)\s+(size|rot)$")
# e.g. "612 x 792 pts (letter)"
_SIZE_VALUE = re.compile(r"([\d.]+)\s*x\s*([\d.]+)")

_POPPLER_ERRORS = (
    PDFInfoNotInstalledError,
    PDFPageCountError,
    PDFPopplerTimeoutError,
    PDFSyntaxError,
)


def parse_page_sizes(info: Dict[str, object]) -> Dict[int, Tuple[float, float]]:
    """
    Extract per-page display sizes from ``pdfinfo_from_path`` output.

    Pages rotated by 90 or 270 degrees have width and height swapped so
    the size matches what the renderer produces.

    Args:
        info: Dictionary returned by ``pdfinfo_from_path`` with a page range.

    Returns:
        Mapping of 1-based page index to (width_pt, height_pt).
    """
    sizes: Dict[int, Tuple[float, float]] = {}
    rotations: Dict[int, int] = {}

    for key, value in info.items():
        match = _PAGE_FIELD.match(str(key).strip())
        if not match:
            continue
        index = int(match.group(1))
        if match.group(2) == "size":
            size = _SIZE_VALUE.search(str(value))
            if size:
                sizes[index] = (float(size.group(1)), float(size.group(2)))
        else:
            try:
                rotations[index] = int(float(str(value).strip())) % 360
            except ValueError:
                rotations[index] = 0

    for index, rotation in rotations.items():
        if index in sizes and rotation in (90, 270):
            width, height = sizes[index]
            sizes[index] = (height, width)

    return sizes


class PopplerDocumentSource(DocumentSource):
    """
    PDF document rendered one page at a time with Poppler.

    Page metadata is read lazily with ``pdfinfo`` on first access; each
    ``render`` call runs ``pdftoppm`` for a single page.
    """

    def __init__(
        self,
        pdf_path: Union[str, Path],
        poppler_path: Optional[str] = None,
        timeout: Optional[int] = None
    ):
        """
        Initialize the document source.

        Args:
            pdf_path: Path to the PDF file.
            poppler_path: Poppler bin directory, or None to use PATH.
            timeout: Optional per-call Poppler timeout in seconds.
        """
        self.pdf_path = Path(pdf_path)
        self.poppler_path = poppler_path or None
        self.timeout = timeout
        self._page_count: Optional[int] = None
        self._sizes: Dict[int, Tuple[float, float]] = {}

    @property
    def page_count(self) -> int:
        if self._page_count is None:
            self._load_info()
        return self._page_count

    def page(self, index: int) -> Page:
        if index < 1 or index > self.page_count:
            raise RenderFailure(index, f"page out of range (1-{self.page_count})")
        if index not in self._sizes:
            raise RenderFailure(index, "page size not reported by pdfinfo")
        width, height = self._sizes[index]
        return Page(index=index, width=width, height=height)

    def render(self, page: Page, scale: float) -> RasterSurface:
        width, height = raster_size(page, scale)
        logger.debug(f"Rendering page {page.index} at scale {scale:.4f} -> {width}x{height}px")

        try:
            images = convert_from_path(
                str(self.pdf_path),
                first_page=page.index,
                last_page=page.index,
                size=(width, height),
                fmt="png",
                poppler_path=self.poppler_path,
                timeout=self.timeout,
            )
        except _POPPLER_ERRORS as e:
            raise RenderFailure(page.index, str(e) or type(e).__name__) from e
        except (OSError, MemoryError, ValueError) as e:
            raise RenderFailure(page.index, str(e) or type(e).__name__) from e

        if not images:
            raise RenderFailure(page.index, "renderer returned no image")

        image = images[0]
        for extra in images[1:]:
            extra.close()

        if image.size != (width, height):
            logger.debug(
                f"Page {page.index}: resizing {image.size[0]}x{image.size[1]} "
                f"to {width}x{height}"
            )
            resized = image.resize((width, height), Image.LANCZOS)
            image.close()
            image = resized

        return RasterSurface(width=width, height=height, image=image)

    def _load_info(self) -> None:
        """Read page count and page sizes with pdfinfo."""
        if not self.pdf_path.exists():
            raise RenderFailure(None, f"file not found: {self.pdf_path}")

        try:
            info = pdfinfo_from_path(
                str(self.pdf_path),
                poppler_path=self.poppler_path,
                timeout=self.timeout,
            )
            count = int(info["Pages"])
            if count > 0:
                info = pdfinfo_from_path(
                    str(self.pdf_path),
                    poppler_path=self.poppler_path,
                    timeout=self.timeout,
                    first_page=1,
                    last_page=count,
                )
        except _POPPLER_ERRORS as e:
            raise RenderFailure(None, str(e) or type(e).__name__) from e
        except (OSError, KeyError, ValueError) as e:
            raise RenderFailure(None, str(e) or type(e).__name__) from e

        self._sizes = parse_page_sizes(info)
        self._page_count = count
        logger.info(f"PDF loaded: {self.pdf_path.name} ({count} pages)")
