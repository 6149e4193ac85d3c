"""
Tag Scheduler

Per-session state and the entry points the host calls.
"""

from __future__ import annotations
import os
from typing import Callable, Optional

from loguru import logger
from pubsub import pub

from . import topics
from .application_launcher import ApplicationLauncher
from .backfill import GapBackfiller
from .binding_manager import BindingManager
from .config import SchedulerConfig
from .errors import SchedulingError
from .focus_scheduler import FocusScheduler
from .host import Host
from .hooks import (
    BackfillGaps,
    EventHook,
    HookChain,
    ManageHook,
    PlaceWindow,
    ReconcileRecency,
    RecordWindow,
    RefreshHook,
    StartupHook,
)
from .pinned_apps import PinnedAppRegistry
from .protocol import KeyEvent
from .recency import RecencyTracker
from .tag_controller import TagController
from .tag_resolver import TagResolver
from .task_switcher import TaskSwitcher
from .window_set import Window, WindowSet


class TagScheduler:
    """
    Tag placement and focus scheduling for one window manager session.

    Owns the window set, the recency tracker and every component as plain
    fields. The host calls the on_* methods; each runs one hook chain in its
    fixed order:

    - window mapped: place window, record window
    - refresh: backfill gaps, reconcile recency
    - input event: task switcher, key bindings
    - startup: autostart programs
    """

    def __init__(
        self,
        host: Host,
        config: Optional[SchedulerConfig] = None,
        window_set: Optional[WindowSet] = None,
    ):
        """Initialize the scheduler.

        Architecture:
        1. Build the static tables (tags, pinned apps, bindings)
        2. Create components - they self-subscribe to events
        3. Assemble the hook chains
        """
        self.config = config or SchedulerConfig()
        self.host = host

        # Setup debug event logging if enabled
        if os.getenv("TAGWM_DEBUG"):
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self.window_set = window_set or WindowSet(
            self.config.tags, screens=self.config.screens
        )
        self.registry = PinnedAppRegistry(self.config.pinned_apps)
        self.tracker = RecencyTracker()

        self.resolver = TagResolver(host, self.registry)
        self.backfiller = GapBackfiller(self.registry)

        # Focus cycling and task switching (self-subscribes)
        self.focus_scheduler = FocusScheduler(self.window_set, self.tracker, host)

        # Tag keys and window commands (self-subscribes)
        self.tag_controller = TagController(
            bus=pub, window_set=self.window_set, registry=self.registry, host=host
        )

        # Application spawning (self-subscribes)
        self.application_launcher = ApplicationLauncher(bus=pub, config=self.config)

        # Key bindings (publishes command events)
        self.binding_manager = BindingManager()
        self.binding_manager.setup_default_bindings(self.config)
        self.binding_manager.setup_custom_bindings(self.config.custom_keybindings)

        self.task_switcher = TaskSwitcher(self.config.switch_mod)

        self.manage_hooks: HookChain[ManageHook] = HookChain(
            [PlaceWindow(), RecordWindow()]
        )
        self.refresh_hooks: HookChain[RefreshHook] = HookChain(
            [BackfillGaps(), ReconcileRecency()]
        )
        self.event_hooks: HookChain[EventHook] = HookChain(
            [self.task_switcher, self.binding_manager]
        )
        self.startup_hooks: HookChain[StartupHook] = HookChain(
            [self.application_launcher]
        )

        # Tag chosen by the manage hooks for the window being mapped
        self.last_placement: Optional[str] = None

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        logger.debug("EVENT: {} | {}", topic_name, data_str)

    def _dispatch(self, event_name: str, run: Callable[[], bool]) -> Optional[bool]:
        """Run one event's hook chain, aborting only this event on failure."""
        try:
            return run()
        except SchedulingError as e:
            logger.error("Aborted {} event: {}", event_name, e)
            return None

    def on_startup(self):
        """Run startup hooks once the host is ready."""
        logger.info(
            "Scheduling {} tags, {} pinned apps",
            len(self.window_set.tags()),
            len(self.registry),
        )
        self._dispatch(
            "startup", lambda: self.startup_hooks.run(lambda h: h.on_startup(self))
        )
        pub.sendMessage(topics.LIFECYCLE_STARTUP)

    def on_window_mapped(self, window: Window) -> Optional[str]:
        """Place a new top-level window.

        Returns:
            The tag the window was placed on, or None if placement failed
        """
        if window not in self.window_set:
            self.window_set.insert(window)

        self.last_placement = None
        ok = self._dispatch(
            "window-mapped",
            lambda: self.manage_hooks.run(lambda h: h.on_window_mapped(window, self)),
        )
        if ok is None:
            return None

        tag = self.last_placement
        pub.sendMessage(topics.WINDOW_MAPPED, window=window, tag=tag)
        return tag

    def on_window_unmapped(self, window: Window):
        """Drop a closed window from the window set.

        The recency lists catch up on the next refresh.
        """
        self.window_set.remove_client(window)

    def on_refresh(self):
        """Reconcile tag numbering and recency after a state change."""
        self._dispatch(
            "refresh", lambda: self.refresh_hooks.run(lambda h: h.on_refresh(self))
        )
        pub.sendMessage(topics.LIFECYCLE_REFRESH)

    def on_input_event(self, event: KeyEvent) -> bool:
        """Feed a raw key event through the input hooks.

        Returns:
            True if the host should continue normal processing
        """
        handled = self._dispatch(
            "input", lambda: self.event_hooks.run(lambda h: h.on_input_event(event, self))
        )
        return handled is not False
