"""
Job progress tracking.

Turns page completions into a non-decreasing percentage and notifies
listeners. Reaching 100 marks the end of an attempt, not its success.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .geometry import round_half_up

logger = logging.getLogger(__name__)

ProgressListener = Callable[[int], None]


def percent_for(page_index: int, total_pages: int) -> int:
    """
    Completion percentage after ``page_index`` of ``total_pages`` pages.

    Args:
        page_index: Number of completed pages (1-based index of the last one).
        total_pages: Total page count.

    Returns:
        Percentage 0-100. An empty document counts as complete.

    Example:
        >>> percent_for(1, 3)
        33
    """
    if total_pages <= 0:
        return 100
    return int(round_half_up(page_index / total_pages * 100))


class ProgressTracker:
    """Emits monotonic progress values to registered listeners."""

    def __init__(self, listener: Optional[ProgressListener] = None):
        self._listeners: List[ProgressListener] = []
        self._last = 0
        if listener is not None:
            self.subscribe(listener)

    @property
    def last(self) -> int:
        """Most recently emitted value."""
        return self._last

    def subscribe(self, listener: ProgressListener) -> None:
        self._listeners.append(listener)

    def advance(self, page_index: int, total_pages: int) -> int:
        """
        Record a completed page and emit the new percentage.

        Values lower than the previous emission are clamped to it.

        Returns:
            The emitted percentage.
        """
        value = max(self._last, percent_for(page_index, total_pages))
        self._emit(value)
        return value

    def finish(self) -> bool:
        """
        Emit 100 to mark the end of the attempt.

        Returns:
            True if a value was emitted, False if 100 was already reached.
        """
        if self._last == 100:
            return False
        self._emit(100)
        return True

    def _emit(self, value: int) -> None:
        self._last = value
        for listener in self._listeners:
            try:
                listener(value)
            except Exception:
                # Listeners must never stall or abort the pipeline
                logger.exception(f"Progress listener failed at {value}%")
