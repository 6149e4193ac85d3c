"""
Host Capabilities

The window manager runtime that embeds the scheduler implements this
interface. Everything here is a side effect on the real display server; the
scheduler's own bookkeeping lives in WindowSet.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .protocol import QueryResult, WindowIdentity
    from .window_set import Window


class Host(ABC):
    """Abstract capabilities the scheduler needs from its host."""

    @abstractmethod
    def query_identity(self, window: Window) -> QueryResult[WindowIdentity]:
        """
        Read a window's application identity (WM_CLASS or app_id).

        Must not raise: a failed property read is reported as
        QueryResult.failed(...).
        """
        pass

    @abstractmethod
    def refresh(self):
        """Push the window set state to the display (focus, visibility, layout)."""
        pass

    @abstractmethod
    def kill_window(self, window: Window):
        """Ask a window to close."""
        pass

    @abstractmethod
    def quit(self):
        """Stop the window manager."""
        pass
