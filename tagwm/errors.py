"""
Exceptions raised by the scheduling engine.

Soft lookup failures never raise; they are reported through QueryResult and
treated as "no match". Only structural failures raise, and they abort the
current event only.
"""


class TagwmError(Exception):
    """Base class for all tagwm errors."""


class ConfigError(TagwmError):
    """Invalid static configuration (tags, pinned apps, bindings)."""


class SchedulingError(TagwmError):
    """Structural failure while handling one event."""


class TagCreationError(SchedulingError):
    """The window set rejected a new tag."""

    def __init__(self, tag: str, reason: str = "tag already exists"):
        super().__init__(f"Cannot create tag {tag!r}: {reason}")
        self.tag = tag
        self.reason = reason


class WorkspaceNotFoundError(SchedulingError):
    """A tag was looked up that the window set does not know."""

    def __init__(self, tag: str):
        super().__init__(f"No workspace for tag {tag!r}")
        self.tag = tag
