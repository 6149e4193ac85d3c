"""
Window Set

In-memory model of the host's workspaces, screens and focus. The host
delivers windows as opaque hashable identifiers; this module only keeps track
of which tag holds them and which one is focused.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Iterator, List, Optional

from .errors import TagCreationError, WorkspaceNotFoundError
from .layouts import LayoutStack

Window = Hashable


@dataclass
class Workspace:
    """Represents a workspace/tag containing windows."""

    tag: str
    windows: List[Window] = field(default_factory=list)
    layouts: LayoutStack = field(default_factory=LayoutStack.default)
    focused_window: Optional[Window] = None

    def __contains__(self, window: Window) -> bool:
        return window in self.windows

    @property
    def is_empty(self) -> bool:
        return not self.windows

    @property
    def layout_name(self) -> str:
        return self.layouts.name

    def add_window(self, window: Window, focus: bool = False):
        """Add a window to the workspace."""
        if window not in self.windows:
            self.windows.append(window)
        if focus or self.focused_window is None:
            self.focused_window = window

    def remove_window(self, window: Window):
        """Remove a window from the workspace."""
        if window in self.windows:
            idx = self.windows.index(window)
            self.windows.remove(window)
            if self.focused_window == window:
                # Focus falls to the neighbour that took the removed slot
                if self.windows:
                    self.focused_window = self.windows[min(idx, len(self.windows) - 1)]
                else:
                    self.focused_window = None

    def set_layouts(self, layouts: LayoutStack) -> LayoutStack:
        """Replace the layout stack, returning the previous one."""
        old, self.layouts = self.layouts, layouts
        return old

    def set_layout_by_name(self, name: str) -> bool:
        return self.layouts.set_by_name(name)


@dataclass
class Screen:
    """A physical display showing one tag."""

    index: int
    tag: str


class WindowSet:
    """
    Workspaces in tag order, the screens showing them, and per-tag focus.

    The first tags are shown on the screens (one each); the remaining tags are
    hidden. Tag order is creation order and never changes.
    """

    def __init__(
        self,
        tags: Iterable[str],
        screens: int = 1,
        layouts: Optional[LayoutStack] = None,
    ):
        self._workspaces: Dict[str, Workspace] = {}
        self._window_tag: Dict[Window, str] = {}  # window -> tag

        for tag in tags:
            self.add_workspace(tag, layouts.copy() if layouts else None)

        if screens < 1:
            raise ValueError("A window set needs at least one screen")
        if screens > len(self._workspaces):
            raise ValueError(
                f"{screens} screens but only {len(self._workspaces)} tags to show"
            )

        ordered = list(self._workspaces)
        self.screens: List[Screen] = [
            Screen(index=i, tag=ordered[i]) for i in range(screens)
        ]
        self._current_screen = 0

    # Workspaces

    def ordered_workspaces(self) -> List[Workspace]:
        """All workspaces in tag order."""
        return list(self._workspaces.values())

    def tags(self) -> List[str]:
        return list(self._workspaces)

    def workspace(self, tag: str) -> Optional[Workspace]:
        return self._workspaces.get(tag)

    def require_workspace(self, tag: str) -> Workspace:
        """Get a workspace, raising WorkspaceNotFoundError for unknown tags."""
        workspace = self._workspaces.get(tag)
        if workspace is None:
            raise WorkspaceNotFoundError(tag)
        return workspace

    def add_workspace(self, tag: str, layouts: Optional[LayoutStack] = None) -> Workspace:
        """Create a new (hidden) workspace at the end of the tag order."""
        if not tag:
            raise TagCreationError(tag, "empty tag label")
        if tag in self._workspaces:
            raise TagCreationError(tag)
        workspace = Workspace(tag=tag, layouts=layouts or LayoutStack.default())
        self._workspaces[tag] = workspace
        return workspace

    # Windows

    def __contains__(self, window: Window) -> bool:
        return window in self._window_tag

    def __iter__(self) -> Iterator[Window]:
        return iter(self.clients())

    def __len__(self) -> int:
        return len(self._window_tag)

    def clients(self) -> List[Window]:
        """All windows, in tag order and stacking order within each tag."""
        return [w for ws in self._workspaces.values() for w in ws.windows]

    def tag_for(self, window: Window) -> Optional[str]:
        return self._window_tag.get(window)

    def insert(self, window: Window, tag: Optional[str] = None):
        """Add a new window to a tag (the current one by default) and focus it."""
        if window in self._window_tag:
            return
        tag = tag if tag is not None else self.current_tag
        self.require_workspace(tag).add_window(window, focus=True)
        self._window_tag[window] = tag

    def remove_client(self, window: Window) -> Optional[str]:
        """Forget a window. Returns the tag it was on."""
        tag = self._window_tag.pop(window, None)
        if tag is not None:
            self._workspaces[tag].remove_window(window)
        return tag

    def move_client_to_tag(self, window: Window, tag: str) -> bool:
        """Move a window to another tag, where it becomes the focused window.

        Returns:
            False if the window is not managed
        """
        target = self.require_workspace(tag)
        old_tag = self._window_tag.get(window)
        if old_tag is None:
            return False
        if old_tag != tag:
            self._workspaces[old_tag].remove_window(window)
            self._window_tag[window] = tag
        target.add_window(window, focus=True)
        return True

    # Screens and focus

    @property
    def current_screen(self) -> Screen:
        return self.screens[self._current_screen]

    @property
    def current_tag(self) -> str:
        return self.current_screen.tag

    @property
    def current_workspace(self) -> Workspace:
        return self._workspaces[self.current_tag]

    def current_client(self) -> Optional[Window]:
        """The focused window of the current screen's tag."""
        return self.current_workspace.focused_window

    def screen_for_tag(self, tag: str) -> Optional[Screen]:
        for screen in self.screens:
            if screen.tag == tag:
                return screen
        return None

    def visible_tags(self) -> List[str]:
        return [screen.tag for screen in self.screens]

    def focus_screen(self, index: int) -> bool:
        if not 0 <= index < len(self.screens):
            return False
        self._current_screen = index
        return True

    def focus_tag(self, tag: str):
        """Show a tag.

        If another screen already shows it, that screen becomes current.
        Otherwise the tag replaces the current screen's tag.
        """
        self.require_workspace(tag)
        screen = self.screen_for_tag(tag)
        if screen is not None:
            self._current_screen = screen.index
        else:
            self.current_screen.tag = tag

    def pull_tag_to_screen(self, tag: str):
        """Show a tag on the current screen, swapping with the screen showing it."""
        self.require_workspace(tag)
        current = self.current_screen
        if current.tag == tag:
            return
        other = self.screen_for_tag(tag)
        if other is not None:
            other.tag = current.tag
        current.tag = tag

    def focus_client(self, window: Window) -> bool:
        """Show the tag holding a window and focus it there."""
        tag = self._window_tag.get(window)
        if tag is None:
            return False
        self.focus_tag(tag)
        self._workspaces[tag].focused_window = window
        return True
