"""
Recency Tracker

Keeps two orderings of the open windows:

- chronological: the order windows were first seen (cycling within a tag)
- recent: most recently focused first (task switching)

While a task switching gesture is in progress the focus order is frozen, so
that stepping through several candidates does not keep moving the one just
focused to the front.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, List, Optional

from loguru import logger

if TYPE_CHECKING:
    from .window_set import Window


class RecencyTracker:
    """Per-session focus history."""

    def __init__(self):
        self.chronological: List[Window] = []
        self.recent: List[Window] = []
        self.switching = False

    def __contains__(self, window: Window) -> bool:
        return window in self.recent

    def reset(self):
        """Forget everything (new session)."""
        self.chronological.clear()
        self.recent.clear()
        self.switching = False

    def record_new(self, window: Window):
        """Record a freshly mapped window as the most recent one."""
        if window in self.recent:
            self.recent.remove(window)
        self.recent.insert(0, window)
        if window not in self.chronological:
            self.chronological.append(window)

    def reconcile(
        self, live_windows: Iterable[Window], focused: Optional[Window] = None
    ) -> List[Window]:
        """Bring both lists in line with the windows that are actually open.

        Closed windows are dropped, windows nobody recorded are appended in
        the order given, and unless a switch is in progress the focused window
        moves to the front of the recent list.

        Args:
            live_windows: Every open window, in the host's enumeration order
            focused: The host's focused window, if any

        Returns:
            The windows that were dropped
        """
        live = list(dict.fromkeys(live_windows))
        live_set = set(live)

        dropped = [w for w in self.chronological if w not in live_set]
        dropped += [w for w in self.recent if w not in live_set and w not in dropped]
        if dropped:
            logger.debug("Forgetting closed windows: {}", dropped)

        self.recent = [w for w in self.recent if w in live_set]
        self.chronological = [w for w in self.chronological if w in live_set]

        known_recent = set(self.recent)
        known_chronological = set(self.chronological)
        self.recent.extend(w for w in live if w not in known_recent)
        self.chronological.extend(w for w in live if w not in known_chronological)

        if not self.switching and focused is not None and focused in live_set:
            self.recent.remove(focused)
            self.recent.insert(0, focused)

        return dropped

    def begin_switch(self):
        """Freeze the recent order for the duration of a gesture."""
        self.switching = True

    def end_switch(
        self, live_windows: Iterable[Window], focused: Optional[Window] = None
    ) -> bool:
        """Finish a gesture and commit the final focus.

        Returns:
            False if no gesture was in progress
        """
        if not self.switching:
            return False
        self.switching = False
        self.reconcile(live_windows, focused)
        return True
