"""
Focus Scheduler

Moves focus through candidate lists built from the recency tracker.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

from loguru import logger

from .protocol import Direction, SwitchScope

if TYPE_CHECKING:
    from .host import Host
    from .recency import RecencyTracker
    from .window_set import Window, WindowSet


def step(position: int, count: int, direction: Direction) -> int:
    """Advance one position in a ring of `count` candidates."""
    if direction is Direction.FORWARD:
        return (position + 1) % count
    return (position - 1) % count


class FocusScheduler:
    """Cycles focus within a tag and switches between recent windows.

    This component subscribes to focus command events and publishes
    FOCUS_CHANGED whenever it moves focus.

    Responsibilities:
    - CMD_CYCLE_TAG: Focus the next window of a tag, in opening order
    - CMD_TASK_SWITCH: Step through windows in most-recently-focused order
    """

    def __init__(self, window_set: WindowSet, tracker: RecencyTracker, host: Host):
        """Initialize focus scheduler.

        Args:
            window_set: Workspaces and focus state to act on
            tracker: Recency tracker providing the candidate orders
            host: Host to refresh after focus moved
        """
        self.window_set = window_set
        self.tracker = tracker
        self.host = host

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to focus command events."""
        from pubsub import pub
        from . import topics

        pub.subscribe(self._on_cycle_tag, topics.CMD_CYCLE_TAG)
        pub.subscribe(self._on_task_switch, topics.CMD_TASK_SWITCH)

    def cycle_within_tag(self, tag: str) -> Optional[Window]:
        """Focus the next window on a tag, in the order windows were opened.

        Returns:
            The newly focused window, or None if there is nothing to cycle
        """
        workspace = self.window_set.workspace(tag)
        if workspace is None:
            logger.debug("Not cycling unknown tag {}", tag)
            return None

        members = set(workspace.windows)
        candidates = [w for w in self.tracker.chronological if w in members]
        return self._focus_step(candidates, workspace.focused_window, Direction.FORWARD)

    def task_switch(self, scope: SwitchScope, direction: Direction) -> Optional[Window]:
        """Focus the next or previous window in most-recently-focused order.

        The caller brackets a gesture with RecencyTracker.begin_switch() and
        end_switch() so the order stays put while stepping.

        Returns:
            The newly focused window, or None if there are no candidates
        """
        if scope is SwitchScope.WORKSPACE:
            members = set(self.window_set.current_workspace.windows)
        else:
            members = set(self.window_set.clients())

        candidates = [w for w in self.tracker.recent if w in members]
        return self._focus_step(candidates, self.window_set.current_client(), direction)

    def _focus_step(
        self,
        candidates: List[Window],
        focused: Optional[Window],
        direction: Direction,
    ) -> Optional[Window]:
        from pubsub import pub
        from . import topics

        if not candidates:
            return None

        position = candidates.index(focused) if focused in candidates else 0
        new_position = step(position, len(candidates), direction)
        logger.debug("New focused position: {} (was: {})", new_position, position)

        window = candidates[new_position]
        self.window_set.focus_client(window)
        self.host.refresh()

        pub.sendMessage(topics.FOCUS_CHANGED, window=window)
        return window

    def _on_cycle_tag(self, tag: str):
        """Handle CMD_CYCLE_TAG command."""
        self.cycle_within_tag(tag)

    def _on_task_switch(self, scope: SwitchScope, direction: Direction):
        """Handle CMD_TASK_SWITCH command."""
        self.task_switch(scope, direction)
