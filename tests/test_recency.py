"""
Unit tests for RecencyTracker.
"""

import pytest
from tagwm.recency import RecencyTracker


@pytest.mark.unit
class TestRecencyTracker:
    """Test the two recency orders and the switching flag."""

    def test_record_new(self):
        tracker = RecencyTracker()

        for window in ["a", "b", "c"]:
            tracker.record_new(window)

        assert tracker.recent == ["c", "b", "a"]
        assert tracker.chronological == ["a", "b", "c"]

    def test_record_existing_does_not_duplicate(self):
        tracker = RecencyTracker()
        tracker.record_new("a")
        tracker.record_new("b")

        tracker.record_new("a")

        assert tracker.recent == ["a", "b"]
        assert tracker.chronological == ["a", "b"]

    def test_reconcile_drops_closed_windows(self):
        tracker = RecencyTracker()
        for window in ["a", "b", "c"]:
            tracker.record_new(window)

        dropped = tracker.reconcile(["a", "c"])

        assert dropped == ["b"]
        assert tracker.recent == ["c", "a"]
        assert tracker.chronological == ["a", "c"]

    def test_reconcile_adopts_unknown_windows(self):
        tracker = RecencyTracker()
        tracker.record_new("a")

        tracker.reconcile(["x", "a", "y"])

        assert tracker.recent == ["a", "x", "y"]
        assert tracker.chronological == ["a", "x", "y"]

    def test_reconcile_promotes_focused(self):
        tracker = RecencyTracker()
        for window in ["a", "b", "c"]:
            tracker.record_new(window)

        tracker.reconcile(["a", "b", "c"], focused="a")

        assert tracker.recent == ["a", "c", "b"]
        assert tracker.chronological == ["a", "b", "c"]

    def test_reconcile_ignores_focus_on_closed_window(self):
        tracker = RecencyTracker()
        tracker.record_new("a")

        tracker.reconcile(["a"], focused="gone")

        assert tracker.recent == ["a"]

    def test_reconcile_is_idempotent(self):
        tracker = RecencyTracker()
        for window in ["a", "b", "c", "d"]:
            tracker.record_new(window)
        live = ["d", "b", "a", "e"]

        tracker.reconcile(live, focused="b")
        first = (list(tracker.recent), list(tracker.chronological))
        tracker.reconcile(live, focused="b")

        assert (tracker.recent, tracker.chronological) == first

    def test_lists_hold_same_windows(self):
        tracker = RecencyTracker()
        tracker.recent = ["a", "b"]
        tracker.chronological = ["b", "c"]

        tracker.reconcile(["a", "b", "c"])

        assert set(tracker.recent) == set(tracker.chronological) == {"a", "b", "c"}
        assert len(tracker.recent) == len(tracker.chronological) == 3

    def test_switching_suppresses_promotion(self):
        tracker = RecencyTracker()
        for window in ["a", "b", "c"]:
            tracker.record_new(window)

        tracker.begin_switch()
        tracker.reconcile(["a", "b", "c"], focused="a")

        assert tracker.recent == ["c", "b", "a"]

        assert tracker.end_switch(["a", "b", "c"], focused="a")
        assert not tracker.switching
        assert tracker.recent == ["a", "c", "b"]

    def test_switching_still_drops_closed_windows(self):
        tracker = RecencyTracker()
        for window in ["a", "b", "c"]:
            tracker.record_new(window)

        tracker.begin_switch()
        tracker.reconcile(["a", "c"], focused="a")

        assert tracker.recent == ["c", "a"]

    def test_end_switch_without_gesture(self):
        tracker = RecencyTracker()
        tracker.record_new("a")
        tracker.record_new("b")

        assert not tracker.end_switch(["a", "b"], focused="a")
        assert tracker.recent == ["b", "a"]

    def test_reset(self):
        tracker = RecencyTracker()
        tracker.record_new("a")
        tracker.begin_switch()

        tracker.reset()

        assert tracker.recent == []
        assert tracker.chronological == []
        assert not tracker.switching
