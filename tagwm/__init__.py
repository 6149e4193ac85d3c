"""
tagwm

Tag placement and focus scheduling for tiling window managers.

This package provides:
- Deterministic tag assignment for new windows (pinned apps, grouping by
  application, empty tags, new tags on demand)
- A recency tracker driving Alt-Tab style task switching
- Gap backfilling that keeps occupied tags numbered contiguously
- An ordered hook pipeline and event bus the host window manager plugs into

Example usage:
    from tagwm import TagScheduler, SchedulerConfig

    scheduler = TagScheduler(host, SchedulerConfig(terminal="foot"))
    scheduler.on_startup()

    tag = scheduler.on_window_mapped(window)
    scheduler.on_refresh()
    scheduler.on_input_event(KeyEvent.press(XKB.Tab, Modifiers.MOD1))
"""

__version__ = "0.1.0"
__author__ = "pinpox"

from .protocol import (
    Modifiers,
    XKB,
    KeyEvent,
    KeyEventType,
    Direction,
    SwitchScope,
    WindowIdentity,
    QueryStatus,
    QueryResult,
)

from .errors import (
    TagwmError,
    ConfigError,
    SchedulingError,
    TagCreationError,
    WorkspaceNotFoundError,
)

from .layouts import LayoutStack
from .window_set import Workspace, Screen, WindowSet
from .host import Host

from .pinned_apps import (
    IdentityPredicate,
    AppName,
    ClassName,
    PinnedApp,
    PinnedAppRegistry,
)

from .recency import RecencyTracker
from .tag_resolver import TagResolver
from .backfill import GapBackfiller
from .focus_scheduler import FocusScheduler

from .hooks import (
    ManageHook,
    RefreshHook,
    EventHook,
    StartupHook,
    HookChain,
)

from .config import SchedulerConfig
from .scheduler import TagScheduler

from . import topics

__all__ = [
    # Version
    "__version__",
    # Protocol types
    "Modifiers",
    "XKB",
    "KeyEvent",
    "KeyEventType",
    "Direction",
    "SwitchScope",
    "WindowIdentity",
    "QueryStatus",
    "QueryResult",
    # Errors
    "TagwmError",
    "ConfigError",
    "SchedulingError",
    "TagCreationError",
    "WorkspaceNotFoundError",
    # Window set
    "LayoutStack",
    "Workspace",
    "Screen",
    "WindowSet",
    "Host",
    # Pinned apps
    "IdentityPredicate",
    "AppName",
    "ClassName",
    "PinnedApp",
    "PinnedAppRegistry",
    # Scheduling
    "RecencyTracker",
    "TagResolver",
    "GapBackfiller",
    "FocusScheduler",
    # Hooks
    "ManageHook",
    "RefreshHook",
    "EventHook",
    "StartupHook",
    "HookChain",
    # Session
    "SchedulerConfig",
    "TagScheduler",
    # Event topics
    "topics",
]
