"""
Binding Manager

Maps key chords to command events.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List, Tuple
from dataclasses import dataclass, field

from loguru import logger

from .errors import ConfigError
from .hooks import EventHook
from .protocol import KeyEventType, Modifiers, XKB

if TYPE_CHECKING:
    from .config import SchedulerConfig
    from .protocol import KeyEvent
    from .scheduler import TagScheduler


@dataclass
class KeyBinding:
    """Represents a keyboard binding."""

    keysym: int
    modifiers: Modifiers
    event_topic: str  # Event topic to publish (e.g., 'cmd.kill_focused')
    event_data: dict = field(default_factory=dict)  # Additional event parameters


class BindingManager(EventHook):
    """Manages keyboard bindings.

    Key presses matching a binding exactly (keysym and modifier state) are
    published on the bus as the bound command and consumed.
    """

    def __init__(self):
        self.key_bindings: Dict[Tuple[int, Modifiers], KeyBinding] = {}

    def bind_key(
        self,
        keysym: int,
        modifiers: Modifiers,
        event_topic: str,
        **event_data,
    ):
        """Create a key binding that publishes a command event.

        Args:
            keysym: The key symbol
            modifiers: Modifier keys (Ctrl, Alt, etc.)
            event_topic: The command event topic to publish (e.g., 'cmd.kill_focused')
            **event_data: Optional data to pass with the event (e.g., tag="3")
        """
        chord = (keysym, Modifiers(modifiers))
        if chord in self.key_bindings:
            raise ConfigError(
                f"Key {keysym:#x} with modifiers {modifiers!r} is bound twice"
            )
        self.key_bindings[chord] = KeyBinding(
            keysym, Modifiers(modifiers), event_topic, event_data
        )

    def bindings(self) -> List[KeyBinding]:
        """All bindings, for the host to grab."""
        return list(self.key_bindings.values())

    def setup_default_bindings(self, config: SchedulerConfig):
        """Set up the default window manager bindings.

        Args:
            config: Configuration with modifiers and tag sequence
        """
        from . import topics

        mod = config.mod
        alt = config.switch_mod

        # Window management
        self.bind_key(XKB.q, mod | Modifiers.SHIFT, topics.CMD_KILL_FOCUSED)
        self.bind_key(XKB.Escape, mod | alt, topics.CMD_QUIT)

        # Spawn applications
        self.bind_key(XKB.space, alt, topics.CMD_SPAWN_LAUNCHER)
        self.bind_key(XKB.Return, mod, topics.CMD_SPAWN_TERMINAL)
        self.bind_key(XKB.l, mod, topics.CMD_LOCK)

        # Tag bindings: Mod+1-9, Mod+0 for the tenth tag
        digits = [
            XKB._1,
            XKB._2,
            XKB._3,
            XKB._4,
            XKB._5,
            XKB._6,
            XKB._7,
            XKB._8,
            XKB._9,
            XKB._0,
        ]
        for keysym, tag in zip(digits, config.tags):
            self.bind_key(keysym, mod, topics.CMD_SELECT_TAG, tag=tag)

    def setup_custom_bindings(self, custom_bindings: list):
        """Set up user-defined custom keybindings.

        Args:
            custom_bindings: List of (keysym, modifiers, event_topic, event_data) tuples
        """
        if not custom_bindings:
            return

        for binding in custom_bindings:
            keysym, modifiers, event_topic, event_data = binding
            self.bind_key(keysym, modifiers, event_topic, **event_data)

    def on_input_event(self, event: KeyEvent, session: TagScheduler) -> bool:
        from pubsub import pub

        if event.type is not KeyEventType.PRESS:
            return True

        binding = self.key_bindings.get((event.keysym, Modifiers(event.modifiers)))
        if binding is None:
            return True

        logger.debug("Key {:#x} -> {}", event.keysym, binding.event_topic)
        pub.sendMessage(binding.event_topic, **binding.event_data)
        return False
