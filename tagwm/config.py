"""
Scheduler configuration.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .errors import ConfigError
from .pinned_apps import AppName, ClassName, PinnedApp
from .protocol import Modifiers

TAGS = ["1", "2", "3", "4", "5", "6", "7", "8", "9", "10"]


def default_pinned_apps() -> List[PinnedApp]:
    """Applications that always live on the same tag."""
    return [
        PinnedApp(tag="1", command="emacs", query=AppName("emacs")),
        PinnedApp(tag="2", command="alacritty", query=AppName("Alacritty")),
        PinnedApp(tag="3", command="chromium", query=ClassName("Chromium")),
        PinnedApp(tag="4", command="DiscordCanary", query=AppName("DiscordCanary")),
        PinnedApp(tag="5", command="slack", query=AppName("slack")),
    ]


@dataclass
class SchedulerConfig:
    """Scheduler configuration."""

    # Initial tag sequence, in display order
    tags: List[str] = field(default_factory=lambda: list(TAGS))

    # Pinned applications (each reserves one of the tags above)
    pinned_apps: List[PinnedApp] = field(default_factory=default_pinned_apps)

    # Key binding modifiers
    mod: Modifiers = Modifiers.MOD4
    switch_mod: Modifiers = Modifiers.MOD1

    # Programs
    terminal: str = "alacritty"
    launcher: str = "dmenu_run"
    lock_command: str = "xscreensaver-command --lock"
    autostart: List[str] = field(default_factory=lambda: ["xscreensaver"])

    # Number of screens the window set starts with
    screens: int = 1

    # Custom keybindings: list of (keysym, modifiers, event_topic, event_data) tuples
    # Example: [(XKB.F1, Modifiers.MOD4, topics.CMD_SPAWN, {"command": "pavucontrol"})]
    custom_keybindings: Optional[List[Tuple[int, Modifiers, str, dict]]] = None

    def __post_init__(self):
        """Validate tags and pinned apps."""
        if not self.tags:
            raise ConfigError("At least one tag is required")
        if len(set(self.tags)) != len(self.tags):
            raise ConfigError(f"Tag labels must be unique: {self.tags}")
        for app in self.pinned_apps:
            if app.tag not in self.tags:
                raise ConfigError(
                    f"Pinned app {app.command!r} uses unknown tag {app.tag!r}"
                )
        if not 1 <= self.screens <= len(self.tags):
            raise ConfigError(f"Cannot show {len(self.tags)} tags on {self.screens} screens")
