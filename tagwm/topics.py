"""
Event Topics for tagwm

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Every topic has a fixed set of message arguments. PyPubSub infers that set
from the first listener or message, so all listeners of a topic must use the
argument names documented here.
"""

# Window lifecycle events
WINDOW_MAPPED = "window.mapped"
"""Published after a new window was placed. Params: window, tag"""

WINDOW_FORGOTTEN = "window.forgotten"
"""Published when reconciliation drops a window that is no longer open. Params: window"""

# Tag events
TAG_CREATED = "tag.created"
"""Published when a new numeric tag was created on demand. Params: tag"""

TAGS_BACKFILLED = "tags.backfilled"
"""Published after a backfill pass relabeled groups. Params: moves (old tag -> new tag)"""

# Lifecycle events
LIFECYCLE_STARTUP = "lifecycle.startup"
"""Published once when the session starts."""

LIFECYCLE_REFRESH = "lifecycle.refresh"
"""Published after the refresh hooks ran."""

# Task switching gesture
SWITCH_STARTED = "switch.started"
"""Published when a task switching gesture begins."""

SWITCH_ENDED = "switch.ended"
"""Published when the switch modifier is released and recency was committed."""

# Focus state notifications
FOCUS_CHANGED = "focus.changed"
"""Published when the scheduler moved focus. Params: window (or None)"""

# Command events (imperative - tell components to do something)
# These are triggered by key bindings or the task switcher

CMD_TASK_SWITCH = "cmd.task_switch"
"""Command: Step through recently focused windows. Params: scope, direction"""

CMD_CYCLE_TAG = "cmd.cycle_tag"
"""Command: Focus the next window of a tag in opening order. Params: tag"""

CMD_SELECT_TAG = "cmd.select_tag"
"""Command: Tag key pressed (launch, cycle or show the tag). Params: tag"""

CMD_KILL_FOCUSED = "cmd.kill_focused"
"""Command: Close the focused window."""

CMD_QUIT = "cmd.quit"
"""Command: Quit the window manager."""

CMD_SPAWN = "cmd.spawn"
"""Command: Spawn a shell command. Params: command"""

CMD_SPAWN_TERMINAL = "cmd.spawn_terminal"
"""Command: Spawn a terminal."""

CMD_SPAWN_LAUNCHER = "cmd.spawn_launcher"
"""Command: Spawn application launcher."""

CMD_LOCK = "cmd.lock"
"""Command: Lock the screen."""
