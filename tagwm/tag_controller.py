"""
Tag Controller

Handles tag key presses and window lifecycle commands (close, quit).
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from .host import Host
    from .pinned_apps import PinnedAppRegistry
    from .window_set import WindowSet


class TagController:
    """Handles tag selection and window lifecycle commands.

    Responsibilities:
    - CMD_SELECT_TAG: Launch the pinned app if it is not running, cycle the
      tag's windows if it is already shown, otherwise show the tag
    - CMD_KILL_FOCUSED: Close focused window
    - CMD_QUIT: Quit window manager
    """

    def __init__(
        self,
        bus,
        window_set: WindowSet,
        registry: PinnedAppRegistry,
        host: Host,
    ):
        """Initialize tag controller.

        Args:
            bus: Event bus instance (Pypubsub)
            window_set: Workspaces and focus state to act on
            registry: Pinned application table
            host: Host for refresh, kill and quit
        """
        self.bus = bus
        self.window_set = window_set
        self.registry = registry
        self.host = host

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to tag and window command events."""
        from . import topics

        self.bus.subscribe(self._on_select_tag, topics.CMD_SELECT_TAG)
        self.bus.subscribe(self._on_kill_focused, topics.CMD_KILL_FOCUSED)
        self.bus.subscribe(self._on_quit, topics.CMD_QUIT)

    def select_tag(self, tag: str):
        """React to a tag key."""
        from . import topics

        if self.window_set.workspace(tag) is None:
            logger.warning("Ignoring key for unknown tag {}", tag)
            return

        app = self.registry.lookup_by_tag(tag)
        if app is not None and not self.registry.has_live_instance(
            app, self.window_set.clients(), self.host.query_identity
        ):
            # Not running yet; the new window will be placed on the tag
            logger.debug("No window for pinned app {!r}, launching it", app.command)
            self.bus.sendMessage(topics.CMD_SPAWN, command=app.command)
            return

        if self.window_set.current_tag == tag:
            self.bus.sendMessage(topics.CMD_CYCLE_TAG, tag=tag)
        else:
            self.window_set.focus_tag(tag)
        self.host.refresh()

    def _on_select_tag(self, tag: str):
        """Handle CMD_SELECT_TAG command."""
        self.select_tag(tag)

    def _on_kill_focused(self):
        """Handle CMD_KILL_FOCUSED command."""
        window = self.window_set.current_client()
        if window is not None:
            self.host.kill_window(window)
            # The host reports the closed window; the next refresh forgets it

    def _on_quit(self):
        """Handle CMD_QUIT command."""
        self.host.quit()
