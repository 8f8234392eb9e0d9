"""Output file naming."""
from __future__ import annotations

try:
    from config.defaults import DECK_EXTENSION, SOURCE_EXTENSION
except ImportError:
    from ..config.defaults import DECK_EXTENSION, SOURCE_EXTENSION


def output_name_for(
    source_name: str,
    source_ext: str = SOURCE_EXTENSION,
    deck_ext: str = DECK_EXTENSION
) -> str:
    """
    Derive the deck file name from the source file name.

    A trailing source extension (case-insensitive) is replaced with the
    deck extension; any other name gets the deck extension appended.

    Example:
        >>> output_name_for("Report.PDF")
        'Report.pptx'
        >>> output_name_for("notes.txt")
        'notes.txt.pptx'
    """
    if source_ext and source_name.lower().endswith(source_ext.lower()):
        return source_name[: -len(source_ext)] + deck_ext
    return source_name + deck_ext
