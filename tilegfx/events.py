"""Keyboard and mouse input state with user callbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Action(IntEnum):
    """What happened to a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class KeyData:
    """What a key callback is told about one key event."""

    key: int
    action: Action
    os_key: int
    modifier: int


@dataclass
class _Hook:
    func: Callable[..., Any]
    param: Any


def _require_callable(func: Any) -> None:
    if func is None or not callable(func):
        raise TypeError("a callable hook is required")


class EventHub:
    """Tracks key, button and cursor state and forwards events to hooks.

    Only one hook of each kind is kept; setting another replaces it.
    """

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._buttons: set[int] = set()
        self._cursor: tuple[float, float] = (0.0, 0.0)
        self._key_hook: _Hook | None = None
        self._mouse_hook: _Hook | None = None
        self._scroll_hook: _Hook | None = None
        self._cursor_hook: _Hook | None = None

    def key_hook(self, func: Callable[[KeyData, Any], Any], param: Any = None) -> None:
        """Call ``func(key_data, param)`` for every key event."""
        _require_callable(func)
        self._key_hook = _Hook(func, param)

    def mouse_hook(self, func: Callable[[int, Action, int, Any], Any], param: Any = None) -> None:
        """Call ``func(button, action, modifiers, param)`` for every click."""
        _require_callable(func)
        self._mouse_hook = _Hook(func, param)

    def scroll_hook(self, func: Callable[[float, float, Any], Any], param: Any = None) -> None:
        """Call ``func(xoffset, yoffset, param)`` for every scroll."""
        _require_callable(func)
        self._scroll_hook = _Hook(func, param)

    def cursor_hook(self, func: Callable[[float, float, Any], Any], param: Any = None) -> None:
        """Call ``func(x, y, param)`` whenever the cursor moves."""
        _require_callable(func)
        self._cursor_hook = _Hook(func, param)

    def press_key(self, key: int, action: Action | int, scancode: int = 0,
                  modifiers: int = 0) -> None:
        """Record a key event and pass it to the key hook."""
        action = Action(action)
        if action is Action.RELEASE:
            self._keys.discard(key)
        else:
            self._keys.add(key)
        if self._key_hook is not None:
            data = KeyData(key, action, scancode, modifiers)
            self._key_hook.func(data, self._key_hook.param)

    def is_key_down(self, key: int) -> bool:
        """Return whether ``key`` is currently held."""
        return key in self._keys

    def click(self, button: int, action: Action | int, modifiers: int = 0) -> None:
        """Record a mouse button event and pass it to the mouse hook."""
        action = Action(action)
        if action is Action.RELEASE:
            self._buttons.discard(button)
        else:
            self._buttons.add(button)
        if self._mouse_hook is not None:
            self._mouse_hook.func(button, action, modifiers, self._mouse_hook.param)

    def is_mouse_down(self, button: int) -> bool:
        """Return whether mouse ``button`` is currently held."""
        return button in self._buttons

    def scroll(self, xoffset: float, yoffset: float) -> None:
        """Pass a scroll event to the scroll hook."""
        if self._scroll_hook is not None:
            self._scroll_hook.func(float(xoffset), float(yoffset), self._scroll_hook.param)

    def move_cursor(self, x: float, y: float) -> None:
        """Move the cursor and pass the new position to the cursor hook."""
        self._cursor = (float(x), float(y))
        if self._cursor_hook is not None:
            self._cursor_hook.func(self._cursor[0], self._cursor[1], self._cursor_hook.param)

    def set_mouse_pos(self, x: int, y: int) -> None:
        """Place the cursor at (``x``, ``y``) without notifying hooks."""
        self._cursor = (float(x), float(y))

    def get_mouse_pos(self) -> tuple[int, int]:
        """Return the cursor position truncated to whole pixels."""
        return int(self._cursor[0]), int(self._cursor[1])