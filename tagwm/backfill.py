"""
Gap Backfiller

Renumbers occupied, non-pinned tags into the lowest non-pinned slots so the
tag bar never shows holes. Groups are only relabeled: windows that share a
tag keep sharing one, and each group keeps its layout, its focused window and
the screen it is shown on.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict

from loguru import logger
from pubsub import pub

from . import topics
from .layouts import LayoutStack

if TYPE_CHECKING:
    from .pinned_apps import PinnedAppRegistry
    from .window_set import WindowSet


class GapBackfiller:
    """Refresh hook packing occupied tags to the front."""

    def __init__(self, registry: PinnedAppRegistry):
        self.registry = registry

    def backfill(self, window_set: WindowSet) -> Dict[str, str]:
        """Run one packing pass.

        Returns:
            Mapping of old tag -> new tag for every relabeled group
        """
        targets = [
            ws.tag
            for ws in window_set.ordered_workspaces()
            if not self.registry.is_pinned_tag(ws.tag)
        ]
        occupied = [
            ws.tag
            for ws in window_set.ordered_workspaces()
            if not self.registry.is_pinned_tag(ws.tag) and not ws.is_empty
        ]

        initial_screen = window_set.current_screen.index
        initial_tag = window_set.current_tag
        moves: Dict[str, str] = {}

        for old_tag, new_tag in zip(occupied, targets):
            if old_tag == new_tag:
                continue
            self._relocate(window_set, old_tag, new_tag)
            moves[old_tag] = new_tag

        if not moves:
            return moves

        # Put the user back on their screen; follow their group only if it moved
        window_set.focus_screen(initial_screen)
        if initial_tag in moves and window_set.current_tag != moves[initial_tag]:
            window_set.pull_tag_to_screen(moves[initial_tag])

        pub.sendMessage(topics.TAGS_BACKFILLED, moves=dict(moves))
        return moves

    def _relocate(self, window_set: WindowSet, old_tag: str, new_tag: str):
        logger.debug("Moving {} windows -> {}", old_tag, new_tag)
        source = window_set.require_workspace(old_tag)
        target = window_set.require_workspace(new_tag)

        layouts = source.set_layouts(LayoutStack.default())
        layout_name = layouts.name
        focused = source.focused_window
        screen = window_set.screen_for_tag(old_tag)
        screen_before = window_set.current_screen.index

        for window in list(source.windows):
            window_set.move_client_to_tag(window, new_tag)

        target.set_layouts(layouts)
        target.set_layout_by_name(layout_name)
        if focused is not None:
            target.focused_window = focused

        if screen is not None:
            window_set.focus_screen(screen.index)
            window_set.pull_tag_to_screen(new_tag)
            if focused is not None:
                window_set.focus_client(focused)
            window_set.focus_screen(screen_before)
