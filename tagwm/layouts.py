"""
Layout metadata kept per tag.

The layout algorithms themselves belong to the host. The scheduler only
tracks which layouts a tag can use and which one is active, so that this
configuration can travel with a group of windows when its tag is renumbered.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

MONOCLE = "monocle"
TILE = "tile"


@dataclass
class LayoutStack:
    """Available layouts for a tag, with one of them active."""

    layouts: List[str] = field(default_factory=lambda: [MONOCLE])
    current: int = 0

    def __post_init__(self):
        if not self.layouts:
            raise ValueError("LayoutStack needs at least one layout")
        self.current %= len(self.layouts)

    @classmethod
    def default(cls) -> LayoutStack:
        """Single-window, maximized layout used for new tags."""
        return cls([MONOCLE])

    @property
    def name(self) -> str:
        """Name of the active layout."""
        return self.layouts[self.current]

    def set_by_name(self, name: str) -> bool:
        """Activate a layout by name.

        Returns:
            True if the layout is available, False otherwise
        """
        if name not in self.layouts:
            return False
        self.current = self.layouts.index(name)
        return True

    def copy(self) -> LayoutStack:
        return LayoutStack(list(self.layouts), self.current)
