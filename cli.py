"""
Command line entry point.

Converts a PDF into a PPTX deck with one image slide per page.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config.defaults import APP_NAME, APP_VERSION
from config.settings_manager import Settings
from core.converter import ConversionOrchestrator
from core.models import JobOutcome, ProgressEvent
from core.pdf_renderer import PopplerDocumentSource
from core.slide_builder import SlideBuilder
from ui.log_handler import create_console_handler

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = Settings()
    ap = argparse.ArgumentParser(
        prog="slide-rasterizer",
        description="Render each PDF page to an image and place it on its own PPTX slide.",
    )
    ap.add_argument("pdf", help="Input PDF path")
    ap.add_argument("-o", "--output-dir", default=None,
                    help="Output directory (default: next to the PDF)")
    ap.add_argument("--width", type=float, default=defaults.slide_width,
                    help=f"Slide width in inches (default: {defaults.slide_width})")
    ap.add_argument("--height", type=float, default=defaults.slide_height,
                    help=f"Slide height in inches (default: {defaults.slide_height})")
    ap.add_argument("--dpi", type=int, default=defaults.dpi,
                    help=f"Raster pixels per slide inch (default: {defaults.dpi})")
    ap.add_argument("--poppler-path", default=None,
                    help="Poppler bin directory (default: search PATH)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if args.verbose else logging.INFO)
    root.addHandler(create_console_handler(root.level))

    settings = Settings(
        poppler_path=args.poppler_path or "",
        slide_width=args.width,
        slide_height=args.height,
        dpi=args.dpi,
    )
    if not settings.canvas_ok():
        logger.error("Slide width, height and DPI must be positive")
        return 2

    pdf_path = Path(args.pdf).resolve()
    output_dir = Path(args.output_dir).resolve() if args.output_dir else pdf_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)

    canvas = settings.canvas()
    orchestrator = ConversionOrchestrator(
        source=PopplerDocumentSource(pdf_path, poppler_path=settings.poppler_path),
        sink=SlideBuilder(canvas),
        canvas=canvas,
    )

    outcome: Optional[JobOutcome] = None
    for event in orchestrator.iter_events(pdf_path.name, output_dir):
        if isinstance(event, ProgressEvent):
            print(f"Converting... {event.percent}%", flush=True)
        else:
            outcome = event

    if outcome is None or not outcome.succeeded:
        print(f"Failed: {outcome.error if outcome else 'no result'}", file=sys.stderr)
        return 1

    print(f"Saved: {outcome.artifact_path} ({outcome.slide_count} slides)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
