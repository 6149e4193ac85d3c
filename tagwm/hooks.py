"""
Lifecycle Hooks

The host calls into the scheduler at four points. Each point runs an ordered
chain of handler objects; chains are composed by concatenation and always run
in registration order.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from loguru import logger

if TYPE_CHECKING:
    from .protocol import KeyEvent
    from .scheduler import TagScheduler
    from .window_set import Window


class ManageHook(ABC):
    """Runs once for each new top-level window, before it is shown."""

    @abstractmethod
    def on_window_mapped(self, window: Window, session: TagScheduler):
        pass


class RefreshHook(ABC):
    """Runs after every state change. Must be idempotent."""

    @abstractmethod
    def on_refresh(self, session: TagScheduler):
        pass


class EventHook(ABC):
    """Sees every raw input event."""

    @abstractmethod
    def on_input_event(self, event: KeyEvent, session: TagScheduler) -> bool:
        """Return False when the event was fully handled."""
        pass


class StartupHook(ABC):
    """Runs once when the session starts."""

    @abstractmethod
    def on_startup(self, session: TagScheduler):
        pass


H = TypeVar("H")


class HookChain(Generic[H]):
    """Ordered list of hooks of one kind."""

    def __init__(self, hooks: Iterable[H] = ()):
        self.hooks: List[H] = list(hooks)

    def __iter__(self) -> Iterator[H]:
        return iter(self.hooks)

    def __len__(self) -> int:
        return len(self.hooks)

    def __add__(self, other: Union[HookChain[H], Iterable[H]]) -> HookChain[H]:
        return HookChain(self.hooks + list(other))

    def then(self, hook: H) -> HookChain[H]:
        """New chain with a hook appended."""
        return HookChain(self.hooks + [hook])

    def run(self, invoke: Callable[[H], Optional[bool]]) -> bool:
        """Call `invoke` on each hook in order.

        Stops at the first hook that returns False and returns False; hooks
        returning None or True let the chain continue. Exceptions propagate
        and abort the rest of the chain.
        """
        for hook in self.hooks:
            if invoke(hook) is False:
                logger.trace("{} consumed the event", type(hook).__name__)
                return False
        return True


class PlaceWindow(ManageHook):
    """Moves a new window to the tag chosen by the TagResolver and focuses it."""

    def on_window_mapped(self, window: Window, session: TagScheduler):
        window_set = session.window_set
        tag = session.resolver.resolve(window, window_set)
        window_set.move_client_to_tag(window, tag)
        window_set.focus_tag(tag)
        window_set.focus_client(window)
        session.last_placement = tag


class RecordWindow(ManageHook):
    """Adds a new window to the front of the recency lists."""

    def on_window_mapped(self, window: Window, session: TagScheduler):
        session.tracker.record_new(window)


class BackfillGaps(RefreshHook):
    """Packs occupied tags into the lowest free slots."""

    def on_refresh(self, session: TagScheduler):
        session.backfiller.backfill(session.window_set)


class ReconcileRecency(RefreshHook):
    """Syncs the recency lists with the open windows and current focus."""

    def on_refresh(self, session: TagScheduler):
        from pubsub import pub
        from . import topics

        window_set = session.window_set
        dropped = session.tracker.reconcile(
            window_set.clients(), window_set.current_client()
        )
        for window in dropped:
            pub.sendMessage(topics.WINDOW_FORGOTTEN, window=window)
