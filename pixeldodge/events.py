"""Listener registries and the pointer event passed to rasterizer listeners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .vector import Vector2D


@dataclass(frozen=True)
class PixelMouseEvent:
    """Pointer event already translated into grid coordinates."""
    position: Vector2D


class ListenerRegistry:
    """
    Ordered set of callbacks addressed by integer handles.

    ``add`` hands back a handle; ``remove`` with a handle that is not (or no
    longer) registered does nothing.
    """

    def __init__(self) -> None:
        self._listeners: dict[int, Callable] = {}
        self._next_handle = 1

    def add(self, listener: Callable) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._listeners[handle] = listener
        return handle

    def remove(self, handle: int) -> None:
        self._listeners.pop(handle, None)

    def notify(self, *args) -> None:
        # Copy so listeners may unregister themselves while being notified
        for listener in list(self._listeners.values()):
            listener(*args)

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, handle: int) -> bool:
        return handle in self._listeners
