"""
Tests for core.progress

Covers:
  - percentage calculation
  - monotonic emission and the closing 100
  - listener isolation
"""

from __future__ import annotations

import pytest

from core.progress import ProgressTracker, percent_for


class TestPercentFor:

    @pytest.mark.parametrize(
        "index,total,expected",
        [(1, 3, 33), (2, 3, 67), (3, 3, 100), (1, 8, 13), (3, 5, 60), (1, 1, 100)],
    )
    def test_values(self, index, total, expected):
        assert percent_for(index, total) == expected

    def test_empty_document_is_complete(self):
        assert percent_for(0, 0) == 100

    @pytest.mark.parametrize("total", range(1, 60))
    def test_sequence_non_decreasing_and_ends_at_100(self, total):
        values = [percent_for(i, total) for i in range(1, total + 1)]
        assert values == sorted(values)
        assert values[-1] == 100


class TestProgressTracker:

    def test_advance_notifies_listener(self):
        seen = []
        tracker = ProgressTracker(seen.append)

        assert tracker.advance(1, 4) == 25
        assert tracker.advance(2, 4) == 50
        assert seen == [25, 50]
        assert tracker.last == 50

    def test_never_goes_backwards(self):
        seen = []
        tracker = ProgressTracker(seen.append)
        tracker.advance(3, 4)
        tracker.advance(1, 4)
        assert seen == [75, 75]

    def test_finish_emits_100_once(self):
        seen = []
        tracker = ProgressTracker(seen.append)
        tracker.advance(1, 2)

        assert tracker.finish() is True
        assert tracker.finish() is False
        assert seen == [50, 100]

    def test_finish_after_full_progress_is_silent(self):
        seen = []
        tracker = ProgressTracker(seen.append)
        tracker.advance(2, 2)
        assert tracker.finish() is False
        assert seen == [100]

    def test_multiple_listeners(self):
        first, second = [], []
        tracker = ProgressTracker()
        tracker.subscribe(first.append)
        tracker.subscribe(second.append)
        tracker.advance(1, 1)
        assert first == second == [100]

    def test_failing_listener_does_not_interrupt(self):
        seen = []

        def broken(value):
            raise RuntimeError("display gone")

        tracker = ProgressTracker(broken)
        tracker.subscribe(seen.append)

        assert tracker.advance(1, 2) == 50
        assert seen == [50]
