"""
Core business logic package.

Contains page geometry, PDF rasterization, slide composition and
PPTX generation modules.
"""
from .composer import SlideComposer, encode_image
from .converter import ConversionOrchestrator
from .errors import (
    ConversionError,
    InvalidPageGeometry,
    RenderFailure,
    SerializationFailure,
)
from .geometry import (
    get_aspect_ratio,
    plan_placement,
    px_to_inches,
    raster_size,
    round_half_up,
    scale_for,
    target_pixel_width,
)
from .models import (
    ConversionJob,
    JobOutcome,
    JobStatus,
    OutputDeck,
    Page,
    PlacementBox,
    ProgressEvent,
    RasterSurface,
    Slide,
    SlideCanvas,
)
from .naming import output_name_for
from .pdf_renderer import PopplerDocumentSource
from .ports import DeckSink, DocumentSource
from .progress import ProgressTracker, percent_for
from .slide_builder import SlideBuilder, write_deck

__all__ = [
    # Geometry
    "target_pixel_width",
    "scale_for",
    "raster_size",
    "plan_placement",
    "px_to_inches",
    "get_aspect_ratio",
    "round_half_up",
    # Models
    "Page",
    "SlideCanvas",
    "RasterSurface",
    "PlacementBox",
    "Slide",
    "OutputDeck",
    "JobStatus",
    "ConversionJob",
    "ProgressEvent",
    "JobOutcome",
    # Errors
    "ConversionError",
    "InvalidPageGeometry",
    "RenderFailure",
    "SerializationFailure",
    # Ports and adapters
    "DocumentSource",
    "DeckSink",
    "PopplerDocumentSource",
    "SlideBuilder",
    "write_deck",
    # Pipeline
    "SlideComposer",
    "encode_image",
    "ProgressTracker",
    "percent_for",
    "output_name_for",
    "ConversionOrchestrator",
]
