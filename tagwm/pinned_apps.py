"""
Pinned Applications

Static table binding applications to reserved tags. A pinned tag is meant to
host that application and nothing else; TagResolver sends matching windows
there and GapBackfiller never renumbers it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from loguru import logger

from .errors import ConfigError
from .protocol import QueryStatus

if TYPE_CHECKING:
    from .protocol import QueryResult, WindowIdentity
    from .window_set import Window

IdentityQuery = Callable[["Window"], "QueryResult[WindowIdentity]"]


class IdentityPredicate(ABC):
    """Test applied to a window's identity."""

    @abstractmethod
    def matches(self, identity: WindowIdentity) -> bool:
        pass

    def run(self, window: Window, query: IdentityQuery) -> bool:
        """Evaluate against a live window. Failed or empty queries never match."""
        result = query(window)
        if result.status is QueryStatus.FAILED:
            logger.debug("Identity query failed for {}: {}", window, result.error)
            return False
        identity = result.get()
        return identity is not None and self.matches(identity)


@dataclass(frozen=True)
class AppName(IdentityPredicate):
    """Matches the application (instance) name, the first WM_CLASS string."""

    name: str

    def matches(self, identity: WindowIdentity) -> bool:
        return identity.app_name == self.name


@dataclass(frozen=True)
class ClassName(IdentityPredicate):
    """Matches the class name, the second WM_CLASS string."""

    name: str

    def matches(self, identity: WindowIdentity) -> bool:
        return identity.class_name == self.name


@dataclass(frozen=True)
class PinnedApp:
    """An application bound to a reserved tag."""

    tag: str
    command: str
    query: IdentityPredicate


class PinnedAppRegistry:
    """Read-only lookup table of pinned applications, in table order."""

    def __init__(self, apps: Iterable[PinnedApp] = ()):
        self._apps: Dict[str, PinnedApp] = {}
        for app in apps:
            if app.tag in self._apps:
                raise ConfigError(f"Tag {app.tag!r} is pinned more than once")
            self._apps[app.tag] = app

    def __iter__(self) -> Iterator[PinnedApp]:
        return iter(self._apps.values())

    def __len__(self) -> int:
        return len(self._apps)

    def tags(self) -> List[str]:
        return list(self._apps)

    def is_pinned_tag(self, tag: str) -> bool:
        return tag in self._apps

    def lookup_by_tag(self, tag: str) -> Optional[PinnedApp]:
        return self._apps.get(tag)

    def lookup_by_identity(
        self, window: Window, query: IdentityQuery
    ) -> Optional[Tuple[str, PinnedApp]]:
        """Find the first pinned app whose predicate matches a window."""
        for tag, app in self._apps.items():
            if app.query.run(window, query):
                return tag, app
        return None

    def has_live_instance(
        self, app: PinnedApp, windows: Iterable[Window], query: IdentityQuery
    ) -> bool:
        """Whether any of the given windows belongs to a pinned app."""
        return any(app.query.run(window, query) for window in windows)
