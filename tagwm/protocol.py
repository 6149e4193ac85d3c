"""
Value types shared between the scheduling engine and its host.

This module provides the keyboard event model, the switching enums, the
window identity descriptor and the tri-state result returned by host
property queries.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from typing import Generic, Optional, Tuple, TypeVar


class Modifiers(IntFlag):
    """Keyboard modifiers."""

    NONE = 0
    SHIFT = 1
    CTRL = 4
    MOD1 = 8  # Alt
    MOD3 = 32
    MOD4 = 64  # Super/Logo
    MOD5 = 128


# XKB keysym values (from xkbcommon-keysyms.h)
class XKB:
    """Common XKB keysym constants."""

    # Letters
    a, b, c, d, e, f, g, h, i, j = (
        0x61,
        0x62,
        0x63,
        0x64,
        0x65,
        0x66,
        0x67,
        0x68,
        0x69,
        0x6A,
    )
    k, l, m, n, o, p, q, r, s, t = (
        0x6B,
        0x6C,
        0x6D,
        0x6E,
        0x6F,
        0x70,
        0x71,
        0x72,
        0x73,
        0x74,
    )
    u, v, w, x, y, z = 0x75, 0x76, 0x77, 0x78, 0x79, 0x7A

    # Numbers
    _1, _2, _3, _4, _5 = 0x31, 0x32, 0x33, 0x34, 0x35
    _6, _7, _8, _9, _0 = 0x36, 0x37, 0x38, 0x39, 0x30

    # Special keys
    Return = 0xFF0D
    Escape = 0xFF1B
    Tab = 0xFF09
    ISO_Left_Tab = 0xFE20
    BackSpace = 0xFF08
    space = 0x20
    grave = 0x60

    # Modifiers
    Shift_L = 0xFFE1
    Shift_R = 0xFFE2
    Control_L = 0xFFE3
    Control_R = 0xFFE4
    Alt_L = 0xFFE9
    Alt_R = 0xFFEA
    Super_L = 0xFFEB
    Super_R = 0xFFEC


class KeyEventType(Enum):
    """Raw key event kind."""

    PRESS = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A raw key event as delivered by the host.

    `modifiers` is the modifier state reported with the event. For a release
    of a modifier key itself, hosts report the state after the release.
    """

    type: KeyEventType
    keysym: int
    modifiers: Modifiers = Modifiers.NONE

    @classmethod
    def press(cls, keysym: int, modifiers: Modifiers = Modifiers.NONE) -> KeyEvent:
        return cls(KeyEventType.PRESS, keysym, modifiers)

    @classmethod
    def release(cls, keysym: int, modifiers: Modifiers = Modifiers.NONE) -> KeyEvent:
        return cls(KeyEventType.RELEASE, keysym, modifiers)


class Direction(Enum):
    """Step direction when cycling through candidates."""

    FORWARD = auto()
    BACKWARD = auto()


class SwitchScope(Enum):
    """Which windows take part in a task switch."""

    WORKSPACE = auto()  # Windows on the current tag
    GLOBAL = auto()  # Every managed window


@dataclass(frozen=True)
class WindowIdentity:
    """Application identity of a window (its WM_CLASS strings).

    The first string is the instance/application name, the second one the
    class name. Some clients only report one.
    """

    classes: Tuple[str, ...]

    @property
    def app_name(self) -> Optional[str]:
        return self.classes[0] if self.classes else None

    @property
    def class_name(self) -> Optional[str]:
        if len(self.classes) > 1:
            return self.classes[1]
        return self.app_name


class QueryStatus(Enum):
    """Outcome of a best-effort host query."""

    FOUND = auto()
    NOT_FOUND = auto()
    FAILED = auto()


T = TypeVar("T")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Tri-state result of a host property query."""

    status: QueryStatus
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, value: T) -> QueryResult[T]:
        return cls(QueryStatus.FOUND, value=value)

    @classmethod
    def not_found(cls) -> QueryResult[T]:
        return cls(QueryStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: str) -> QueryResult[T]:
        return cls(QueryStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.FOUND

    def get(self) -> Optional[T]:
        """Collapse to the value, or None for not-found and failed queries."""
        return self.value if self.ok else None
