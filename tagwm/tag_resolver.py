"""
Tag Resolver

Decides which tag a newly mapped window goes to.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from loguru import logger
from pubsub import pub

from . import topics
from .layouts import LayoutStack
from .protocol import QueryStatus

if TYPE_CHECKING:
    from .host import Host
    from .pinned_apps import PinnedAppRegistry
    from .window_set import Window, WindowSet


class TagResolver:
    """Picks a tag for a new window.

    Rules, first match wins:
    1. The window belongs to a pinned app: the pinned tag.
    2. Another window of the same application is open: that window's tag.
    3. A non-pinned tag is empty: the first such tag.
    4. Otherwise a new numeric tag, one past the highest numeric tag.
    """

    def __init__(self, host: Host, registry: PinnedAppRegistry):
        self.host = host
        self.registry = registry

    def resolve(self, window: Window, window_set: WindowSet) -> str:
        """Return the tag for a window, creating one if needed.

        Raises:
            TagCreationError: The window set rejected the new tag
        """
        pinned = self.registry.lookup_by_identity(window, self.host.query_identity)
        if pinned is not None:
            tag, app = pinned
            logger.debug("{} belongs to pinned app {!r} -> {}", window, app.command, tag)
            return tag

        tag = self._find_group(window, window_set)
        if tag is not None:
            logger.debug("{} joins its application already open on {}", window, tag)
            return tag

        for workspace in window_set.ordered_workspaces():
            if workspace.is_empty and not self.registry.is_pinned_tag(workspace.tag):
                logger.debug("{} goes to empty tag {}", window, workspace.tag)
                return workspace.tag

        tag = self.next_free_tag(window_set)
        window_set.add_workspace(tag, LayoutStack.default())
        logger.debug("{} gets new tag {}", window, tag)
        pub.sendMessage(topics.TAG_CREATED, tag=tag)
        return tag

    def _app_name(self, window: Window) -> Optional[str]:
        result = self.host.query_identity(window)
        if result.status is QueryStatus.FAILED:
            logger.debug("Identity query failed for {}: {}", window, result.error)
        identity = result.get()
        # Only the first reported class string is compared
        return identity.app_name if identity is not None else None

    def _find_group(self, window: Window, window_set: WindowSet) -> Optional[str]:
        app_name = self._app_name(window)
        if app_name is None:
            return None
        for workspace in window_set.ordered_workspaces():
            for existing in workspace.windows:
                if existing != window and self._app_name(existing) == app_name:
                    return workspace.tag
        return None

    @staticmethod
    def next_free_tag(window_set: WindowSet) -> str:
        """One past the highest tag label that parses as an integer."""
        numbers = []
        for tag in window_set.tags():
            try:
                numbers.append(int(tag))
            except ValueError:
                continue
        return str(max(numbers, default=0) + 1)
