"""
PDF to slide deck conversion pipeline.

Drives one conversion job: pages are rasterized one at a time, fitted
onto the slide canvas, accumulated into a deck and written out once the
last page is done. The first failure ends the job.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from .composer import SlideComposer, encode_image
from .errors import ConversionError, RenderFailure
from .geometry import plan_placement, px_to_inches, scale_for, target_pixel_width
from .models import (
    ConversionJob,
    JobOutcome,
    JobStatus,
    Page,
    PlacementBox,
    ProgressEvent,
    SlideCanvas,
)
from .naming import output_name_for
from .ports import DeckSink, DocumentSource
from .progress import ProgressListener, ProgressTracker
from .slide_builder import write_deck

logger = logging.getLogger(__name__)

JobEvent = Union[ProgressEvent, JobOutcome]


class ConversionOrchestrator:
    """
    Runs a single conversion job.

    State moves PENDING -> RUNNING -> SUCCEEDED | FAILED. There is no
    cancellation; a job ends after its last page or its first error. A
    consumer that closes ``iter_events`` early leaves the job FAILED.
    Each orchestrator owns its job, composer and sink and is used once.
    """

    def __init__(
        self,
        source: DocumentSource,
        sink: DeckSink,
        canvas: Optional[SlideCanvas] = None,
        on_progress: Optional[ProgressListener] = None,
        document_name: str = ""
    ):
        """
        Initialize the orchestrator.

        Args:
            source: Document to convert.
            sink: Presentation writer receiving the finished deck.
            canvas: Slide canvas (default: 10 x 5.625 in at 96 DPI).
            on_progress: Optional listener called with each percentage.
            document_name: Name used in log messages.
        """
        self.source = source
        self.sink = sink
        self.canvas = canvas or SlideCanvas()
        self.job = ConversionJob(document_name=document_name, canvas=self.canvas)
        self._tracker = ProgressTracker(on_progress)

    def run(self, source_name: str, output_dir: Union[str, Path]) -> JobOutcome:
        """
        Run the job to completion.

        Args:
            source_name: Input file name, used to name the output.
            output_dir: Directory receiving the deck file.

        Returns:
            The terminal JobOutcome.
        """
        outcome = None
        for event in self.iter_events(source_name, output_dir):
            if isinstance(event, JobOutcome):
                outcome = event
        return outcome

    def iter_events(
        self,
        source_name: str,
        output_dir: Union[str, Path]
    ) -> Iterator[JobEvent]:
        """
        Run the job, yielding progress events and a final outcome.

        Args:
            source_name: Input file name, used to name the output.
            output_dir: Directory receiving the deck file.

        Yields:
            ProgressEvent after every page, a closing ProgressEvent(100)
            if not yet emitted, then exactly one JobOutcome.

        Raises:
            RuntimeError: If the job was already submitted.
        """
        if self.job.status is not JobStatus.PENDING:
            raise RuntimeError(f"Job already submitted (status: {self.job.status.value})")

        self.job.document_name = self.job.document_name or source_name
        self.job.status = JobStatus.RUNNING
        logger.info(f"Starting conversion for file: {source_name}")
        logger.info(
            f"Slide size (inches): {self.canvas.width} x {self.canvas.height}, "
            f"{self.canvas.dpi} DPI"
        )

        artifact_name = None
        try:
            total = self.source.page_count
            logger.info(f"Page count: {total}")
            composer = SlideComposer(self.canvas)

            for page, image_data, placement in self._iter_pages(total):
                composer.append_slide(image_data, placement)
                percent = self._tracker.advance(page.index, total)
                self.job.progress = percent
                yield ProgressEvent(percent=percent, page=page.index, total=total)

            logger.info("All pages processed. Generating presentation...")
            deck = composer.finalize()
            artifact_name = output_name_for(source_name)
            artifact_path = write_deck(deck, self.sink, Path(output_dir) / artifact_name)
        except ConversionError as e:
            self._fail(e)
        except GeneratorExit:
            # Consumer stopped iterating; the job cannot finish
            self._fail(ConversionError("Conversion stopped before completion"))
            self._close_progress()
            raise
        except Exception as e:
            self._fail(e)
            self._close_progress()
            raise
        else:
            self.job.status = JobStatus.SUCCEEDED
            self.job.artifact_path = artifact_path
            self.job.slide_count = len(deck)
            logger.info(f"Conversion completed: {artifact_path}")

        if self._close_progress():
            yield ProgressEvent(percent=100)

        if self.job.status is JobStatus.SUCCEEDED:
            yield JobOutcome(
                status=JobStatus.SUCCEEDED,
                artifact_name=artifact_name,
                artifact_path=self.job.artifact_path,
                slide_count=self.job.slide_count,
            )
        else:
            yield JobOutcome(status=JobStatus.FAILED, error=self.job.error)

    def _iter_pages(self, total: int) -> Iterator[Tuple[Page, bytes, PlacementBox]]:
        """Lazily process pages in order, one raster alive at a time."""
        target_width = target_pixel_width(self.canvas.width, self.canvas.dpi)

        for index in range(1, total + 1):
            page = self.source.page(index)
            logger.info(f"Rendering page {index} / {total} ...")

            scale = scale_for(page, target_width)
            surface = self._render(page, scale)
            try:
                logger.info(f"Rendered canvas size (px): {surface.width} x {surface.height}")
                logger.debug(
                    f"Image size (inches): "
                    f"{px_to_inches(surface.width, self.canvas.dpi):.2f} x "
                    f"{px_to_inches(surface.height, self.canvas.dpi):.2f}"
                )
                placement = plan_placement(surface.width, surface.height, self.canvas)
                image_data = encode_image(surface.image)
            finally:
                surface.close()

            logger.info(
                f"Placing image on slide: x={placement.x}in y={placement.y}in "
                f"w={placement.width}in h={placement.height}in"
            )
            yield page, image_data, placement

    def _render(self, page: Page, scale: float):
        try:
            return self.source.render(page, scale)
        except ConversionError:
            raise
        except Exception as e:
            raise RenderFailure(page.index, str(e) or type(e).__name__) from e

    def _fail(self, error: Exception) -> None:
        self.job.status = JobStatus.FAILED
        self.job.error = str(error) or type(error).__name__
        self.job.failure = error
        self.job.artifact_path = None
        logger.error(f"ERROR: {self.job.error}")

    def _close_progress(self) -> bool:
        emitted = self._tracker.finish()
        self.job.progress = 100
        return emitted
