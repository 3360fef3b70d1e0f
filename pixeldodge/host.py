"""pygame-backed drawing surface and pointer event source."""

from __future__ import annotations

from typing import Callable

import pygame

from .events import ListenerRegistry
from .vector import Vector2D

EVENT_KINDS = ("click", "press", "enter", "leave", "move", "quit")
LEFT_MOUSE_BUTTON = 1


class SurfaceError(RuntimeError):
    """Raised when no drawable surface can be obtained from the host."""


class HostSurface:
    """
    The raster the pixel canvases draw onto, plus the event source they
    subscribe to.

    Parameters
    ----------
    surface : pygame.Surface | None
        Window surface or any off-screen surface.
    screen_offset : Vector2D, optional
        Where ``surface`` sits on screen; pointer positions are reported in
        screen space and are corrected by this offset.
    """

    def __init__(self, surface: pygame.Surface | None, screen_offset: Vector2D | None = None) -> None:
        self.surface = surface
        self.screen_offset = screen_offset if screen_offset is not None else Vector2D(0, 0)
        self.is_window = False
        self.pointer_inside = False
        self.listeners: dict[str, ListenerRegistry] = {kind: ListenerRegistry() for kind in EVENT_KINDS}
        self._subscriptions: dict[int, tuple[str, int]] = {}
        self._next_handle = 1

    @classmethod
    def create_window(cls, raw_size: tuple[int, int], caption: str) -> HostSurface:
        """Open the display window at exactly ``raw_size`` raw pixels."""
        try:
            pygame.display.set_caption(caption)
            surface = pygame.display.set_mode(raw_size)
        except pygame.error as e:
            raise SurfaceError(f"Could not open a {raw_size[0]}x{raw_size[1]} window: {e}") from e
        host = cls(surface)
        host.is_window = True
        return host

    # ------------------------------- Geometry -----------------------------------------

    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def bounding_offset(self) -> Vector2D:
        return self.screen_offset

    def contains(self, pos: tuple[int, int]) -> bool:
        w, h = self.size()
        x = pos[0] - self.screen_offset.x
        y = pos[1] - self.screen_offset.y
        return 0 <= x < w and 0 <= y < h

    # ------------------------------- Drawing ------------------------------------------

    def fill_rect(self, x: float, y: float, w: float, h: float, color) -> None:
        self.surface.fill(color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def present(self) -> None:
        if self.is_window:
            pygame.display.flip()

    # ------------------------------- Events -------------------------------------------

    def add_event_listener(self, kind: str, listener: Callable[[pygame.event.Event], None]) -> int:
        if kind not in self.listeners:
            raise ValueError(f"Unknown event kind: {kind!r}")
        handle = self._next_handle
        self._next_handle += 1
        self._subscriptions[handle] = (kind, self.listeners[kind].add(listener))
        return handle

    def remove_event_listener(self, handle: int) -> None:
        subscription = self._subscriptions.pop(handle, None)
        if subscription is None:
            return
        kind, registry_handle = subscription
        self.listeners[kind].remove(registry_handle)

    def subscription_count(self) -> int:
        return sum(len(registry) for registry in self.listeners.values())

    def dispatch(self, event: pygame.event.Event) -> None:
        """Translate one pygame event into host event kinds and notify listeners."""
        if event.type == pygame.QUIT:
            self.listeners["quit"].notify(event)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.listeners["quit"].notify(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_MOUSE_BUTTON:
            self.listeners["press"].notify(event)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_MOUSE_BUTTON:
            self.listeners["click"].notify(event)
        elif event.type == pygame.MOUSEMOTION:
            inside = self.contains(event.pos)
            if inside and not self.pointer_inside:
                self.pointer_inside = True
                self.listeners["enter"].notify(event)
            elif not inside and self.pointer_inside:
                self.pointer_inside = False
                self.listeners["leave"].notify(event)
            if inside:
                self.listeners["move"].notify(event)
        elif event.type == pygame.WINDOWLEAVE:
            if self.pointer_inside:
                self.pointer_inside = False
                self.listeners["leave"].notify(event)

    def pump_events(self) -> None:
        for event in pygame.event.get():
            self.dispatch(event)
