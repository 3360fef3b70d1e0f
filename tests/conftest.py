import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from pixeldodge.host import HostSurface
from pixeldodge.models import ColorConfig, GameConfig, ObstacleConfig
from pixeldodge.vector import Vector2D

BG = (0, 0, 0)
FG = (255, 255, 255)


def make_host(w: int, h: int) -> HostSurface:
    surface = pygame.Surface((w, h))
    surface.fill(BG)
    return HostSurface(surface)


def cell_color(host: HostSurface, origin: tuple[int, int], scale: int, x: int, y: int) -> tuple[int, int, int]:
    return tuple(host.surface.get_at((origin[0] + x * scale, origin[1] + y * scale)))[:3]


def lit_cells(host: HostSurface, origin: tuple[int, int], scale: int, w: int, h: int) -> set[tuple[int, int]]:
    return {
        (x, y)
        for x in range(w)
        for y in range(h)
        if cell_color(host, origin, scale, x, y) == FG
    }


def motion(pos: tuple[int, int]) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(0, 0, 0))


def press(pos: tuple[int, int]) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def release(pos: tuple[int, int]) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1)


@pytest.fixture
def small_config() -> GameConfig:
    """40x20 play area at scale 1, obstacles effectively never spawning on their own."""
    return GameConfig(
        fps=60,
        play_area_size=Vector2D(40, 20),
        pixel_scale=1,
        mouse_pull=1.0,
        obstacle=ObstacleConfig(spawn_freq=1e9, size_min=2, size_max=2, vel_min=1, vel_max=1),
        colors=ColorConfig(fg=FG, bg=BG),
    )
