"""
Task Switcher

Input hook for Alt-Tab style task switching.

Alt+Tab / Alt+Shift+Tab step through all windows, Alt+grave /
Alt+Shift+grave through the windows on the current tag, both in most recently
focused order. The gesture lasts while Alt is held; releasing it commits the
final focus to the recency order.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from loguru import logger

from .hooks import EventHook
from .protocol import Direction, KeyEventType, Modifiers, SwitchScope, XKB

if TYPE_CHECKING:
    from .protocol import KeyEvent
    from .scheduler import TagScheduler


class TaskSwitcher(EventHook):
    """Turns switch key chords into CMD_TASK_SWITCH commands."""

    SCOPES = {
        XKB.Tab: SwitchScope.GLOBAL,
        XKB.ISO_Left_Tab: SwitchScope.GLOBAL,
        XKB.grave: SwitchScope.WORKSPACE,
    }

    def __init__(self, switch_mod: Modifiers = Modifiers.MOD1):
        self.switch_mod = switch_mod

    def on_input_event(self, event: KeyEvent, session: TagScheduler) -> bool:
        from pubsub import pub
        from . import topics

        tracker = session.tracker

        if event.type is KeyEventType.RELEASE:
            if not event.modifiers & self.switch_mod and tracker.switching:
                logger.debug("Switch modifier released, committing focus order")
                window_set = session.window_set
                tracker.end_switch(window_set.clients(), window_set.current_client())
                pub.sendMessage(topics.SWITCH_ENDED)
            return True

        scope = self.SCOPES.get(event.keysym)
        if scope is None:
            return True

        if event.modifiers == self.switch_mod:
            direction = Direction.FORWARD
        elif event.modifiers == self.switch_mod | Modifiers.SHIFT:
            direction = Direction.BACKWARD
        else:
            return True

        if not tracker.switching:
            tracker.begin_switch()
            pub.sendMessage(topics.SWITCH_STARTED)

        pub.sendMessage(topics.CMD_TASK_SWITCH, scope=scope, direction=direction)
        return False
