"""
Virtual pixel surface.

A PixelCanvas maps a grid of integer-addressed cells onto a region of a
HostSurface, one cell per ``pixel_scale x pixel_scale`` block of raw pixels.
It also translates pointer events from screen space into grid space.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

import pygame

from .bitmaps import LETTERS, NUMBERS
from .events import ListenerRegistry, PixelMouseEvent
from .host import HostSurface, SurfaceError
from .vector import Vector2D

Color = tuple[int, int, int]
Bitmap = Sequence[Sequence[int]]


class PixelCanvas:
    """
    Grid-addressed drawing on top of a host surface.

    Parameters
    ----------
    host : HostSurface
        Shared raster and event source.
    origin_raw_pixels : Vector2D
        Top-left corner of this canvas on the host, in raw pixels.
    size : Vector2D
        Logical size in grid cells.
    pixel_scale : float
        Raw pixels per grid cell along each axis.
    """

    def __init__(self, host: HostSurface, origin_raw_pixels: Vector2D, size: Vector2D, pixel_scale: float) -> None:
        if host is None or host.surface is None:
            raise SurfaceError("Could not get a drawable surface from the host")
        self.host = host
        self.origin_raw_pixels = origin_raw_pixels
        self.size = size
        self.pixel_scale = pixel_scale
        self._mouse_pos: Vector2D | None = None
        self._last_mouse_pos: Vector2D | None = None
        self.click_listeners = ListenerRegistry()
        self.mouse_down_listeners = ListenerRegistry()
        self._host_handles = [
            host.add_event_listener("click", self._on_click),
            host.add_event_listener("press", self._on_mouse_down),
            host.add_event_listener("enter", self._update_mouse_pos),
            host.add_event_listener("move", self._update_mouse_pos),
            host.add_event_listener("leave", self._clear_mouse_pos),
        ]

    def destroy(self) -> None:
        """Detach from the host and drop all registered listeners."""
        for handle in self._host_handles:
            self.host.remove_event_listener(handle)
        self._host_handles = []
        self.click_listeners.clear()
        self.mouse_down_listeners.clear()

    # ------------------------------- Pointer ------------------------------------------

    def from_client_pos(self, pos: Vector2D) -> Vector2D:
        """Screen coordinates to grid coordinates, integers addressing cell centres."""
        return Vector2D.add(
            Vector2D.add(pos, self.origin_raw_pixels.negate(), self.host.bounding_offset().negate())
            .scale(1 / self.pixel_scale),
            Vector2D(-0.5, -0.5),
        )

    def _event_pos(self, event: pygame.event.Event) -> Vector2D:
        return self.from_client_pos(Vector2D(*event.pos))

    def _on_click(self, event: pygame.event.Event) -> None:
        self.click_listeners.notify(PixelMouseEvent(self._event_pos(event)))

    def _on_mouse_down(self, event: pygame.event.Event) -> None:
        self.mouse_down_listeners.notify(PixelMouseEvent(self._event_pos(event)))

    def _update_mouse_pos(self, event: pygame.event.Event) -> None:
        self._mouse_pos = self._last_mouse_pos = self._event_pos(event)

    def _clear_mouse_pos(self, event: pygame.event.Event) -> None:
        self._mouse_pos = None

    def mouse_pos(self) -> Vector2D | None:
        return self._mouse_pos

    def last_mouse_pos(self) -> Vector2D | None:
        return self._last_mouse_pos

    def add_click_listener(self, listener: Callable[[PixelMouseEvent], None]) -> int:
        return self.click_listeners.add(listener)

    def remove_click_listener(self, handle: int) -> None:
        self.click_listeners.remove(handle)

    def add_mouse_down_listener(self, listener: Callable[[PixelMouseEvent], None]) -> int:
        return self.mouse_down_listeners.add(listener)

    def remove_mouse_down_listener(self, handle: int) -> None:
        self.mouse_down_listeners.remove(handle)

    # ------------------------------- Drawing ------------------------------------------

    def clear(self, color: Color) -> None:
        self.host.fill_rect(
            self.origin_raw_pixels.x,
            self.origin_raw_pixels.y,
            self.size.x * self.pixel_scale,
            self.size.y * self.pixel_scale,
            color,
        )

    def draw_pixel(self, pixel: Vector2D, color: Color) -> None:
        if pixel.x < 0 or pixel.x >= self.size.x or pixel.y < 0 or pixel.y >= self.size.y:
            return
        x, y = pixel.floored()
        self.host.fill_rect(
            self.origin_raw_pixels.x + x * self.pixel_scale,
            self.origin_raw_pixels.y + y * self.pixel_scale,
            self.pixel_scale,
            self.pixel_scale,
            color,
        )

    def _draw_line_low(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        dx = x1 - x0
        dy = y1 - y0
        yi = 1
        if dy < 0:
            dy = -dy
            yi = -1

        d = 2 * dy - dx
        y = y0
        for x in range(x0, x1 + 1):
            self.draw_pixel(Vector2D(x, y), color)
            if d > 0:
                y += yi
                d += 2 * (dy - dx)
            else:
                d += 2 * dy

    def _draw_line_high(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        dx = x1 - x0
        dy = y1 - y0
        xi = 1
        if dx < 0:
            dx = -dx
            xi = -1

        d = 2 * dx - dy
        x = x0
        for y in range(y0, y1 + 1):
            self.draw_pixel(Vector2D(x, y), color)
            if d > 0:
                x += xi
                d += 2 * (dx - dy)
            else:
                d += 2 * dx

    def draw_line(self, a: Vector2D, b: Vector2D, color: Color) -> None:
        """Bresenham line covering all octants; endpoints are floored to cells."""
        ax, ay = a.floored()
        bx, by = b.floored()
        if abs(by - ay) < abs(bx - ax):
            if ax > bx:
                self._draw_line_low(bx, by, ax, ay, color)
            else:
                self._draw_line_low(ax, ay, bx, by, color)
        else:
            if ay > by:
                self._draw_line_high(bx, by, ax, ay, color)
            else:
                self._draw_line_high(ax, ay, bx, by, color)

    def fill_rect(self, pos: Vector2D, size: Vector2D, color: Color) -> None:
        pos_raw_pixels = Vector2D.add(pos.scale(self.pixel_scale), self.origin_raw_pixels)
        size_raw_pixels = size.scale(self.pixel_scale)
        self.host.fill_rect(pos_raw_pixels.x, pos_raw_pixels.y, size_raw_pixels.x, size_raw_pixels.y, color)

    def fill_circle(self, center: Vector2D, radius: float, color: Color) -> None:
        min_x = math.floor(center.x - radius)
        max_x = math.ceil(center.x + radius)
        min_y = math.floor(center.y - radius)
        max_y = math.ceil(center.y + radius)
        for x in range(min_x, max_x + 1):
            for y in range(min_y, max_y + 1):
                curr_pos = Vector2D(x, y)
                if Vector2D.add(center, curr_pos.negate()).r() <= radius:
                    self.draw_pixel(curr_pos, color)

    def draw_bitmap(self, pos: Vector2D, matrix: Bitmap, color: Color) -> None:
        for y, row in enumerate(matrix):
            for x, pixel in enumerate(row):
                if pixel == 1:
                    self.draw_pixel(Vector2D.add(pos, Vector2D(x, y)), color)

    def draw_number(self, pos: Vector2D, char: str, color: Color) -> None:
        self.draw_bitmap(pos, _lookup_glyph(NUMBERS["STYLISED"], char, "0"), color)

    def draw_char(self, pos: Vector2D, char: str, color: Color) -> None:
        self.draw_bitmap(pos, _lookup_glyph(LETTERS["DEFAULT"], char, "a"), color)

    def sub_canvas(self, origin: Vector2D, size: Vector2D) -> PixelCanvas:
        """A canvas on the same host, offset by ``origin`` cells, with its own listeners."""
        return PixelCanvas(
            self.host,
            Vector2D.add(self.origin_raw_pixels, origin.scale(self.pixel_scale)),
            size,
            self.pixel_scale,
        )


def _lookup_glyph(table: Sequence[Bitmap], char: str, first: str) -> Bitmap:
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    index = ord(char) - ord(first)
    if not 0 <= index < len(table):
        raise ValueError(f"No glyph for {char!r}")
    return table[index]
