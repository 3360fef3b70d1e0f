"""Read-only configuration models used across the game."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    FPS, PLAY_AREA_WIDTH, PLAY_AREA_HEIGHT, PIXEL_SCALE, MOUSE_PULL,
    OBSTACLE_SPAWN_FREQ, OBSTACLE_SIZE_MIN, OBSTACLE_SIZE_MAX, OBSTACLE_VEL_MIN, OBSTACLE_VEL_MAX,
    HIT_FLASH_FREQ, HIT_FLASH_DURATION, RESPAWN_TIME, INVULNERABILITY_DURATION, INVULNERABILITY_FLASH_FREQ,
    BLINK_DISTANCE, BLINK_DURATION, BLINK_COOLDOWN,
    FG_COLOR, BG_COLOR,
)
from .vector import Vector2D


@dataclass(frozen=True)
class ObstacleConfig:
    """
    Obstacle spawning.

    Attributes
    ----------
    spawn_freq : float
        Seconds between two spawns.
    size_min, size_max : float
        Diameter range in grid cells.
    vel_min, vel_max : float
        Speed range in cells per second.
    """
    spawn_freq: float = OBSTACLE_SPAWN_FREQ
    size_min: float = OBSTACLE_SIZE_MIN
    size_max: float = OBSTACLE_SIZE_MAX
    vel_min: float = OBSTACLE_VEL_MIN
    vel_max: float = OBSTACLE_VEL_MAX


@dataclass(frozen=True)
class PlayerHitConfig:
    """Timings (seconds) for the hit flash, respawn wait and invulnerability."""
    flash_freq: float = HIT_FLASH_FREQ
    flash_duration: float = HIT_FLASH_DURATION
    respawn_time: float = RESPAWN_TIME
    invulnerability_duration: float = INVULNERABILITY_DURATION
    invulnerability_flash_freq: float = INVULNERABILITY_FLASH_FREQ


@dataclass(frozen=True)
class BlinkConfig:
    distance: float = BLINK_DISTANCE
    duration: float = BLINK_DURATION
    cooldown: float = BLINK_COOLDOWN


@dataclass(frozen=True)
class ColorConfig:
    fg: tuple[int, int, int] = FG_COLOR
    bg: tuple[int, int, int] = BG_COLOR


@dataclass(frozen=True)
class GameConfig:
    fps: float = FPS
    play_area_size: Vector2D = Vector2D(PLAY_AREA_WIDTH, PLAY_AREA_HEIGHT)
    pixel_scale: float = PIXEL_SCALE
    mouse_pull: float = MOUSE_PULL
    obstacle: ObstacleConfig = field(default_factory=ObstacleConfig)
    player_hit: PlayerHitConfig = field(default_factory=PlayerHitConfig)
    blink: BlinkConfig = field(default_factory=BlinkConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)

    @classmethod
    def default(cls) -> GameConfig:
        return cls()

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot drive a game."""
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.pixel_scale <= 0:
            raise ValueError(f"pixel_scale must be positive, got {self.pixel_scale}")
        if self.play_area_size.x <= 0 or self.play_area_size.y <= 0:
            raise ValueError(f"play_area_size must be positive, got {self.play_area_size}")
        if self.obstacle.spawn_freq <= 0:
            raise ValueError(f"obstacle.spawn_freq must be positive, got {self.obstacle.spawn_freq}")
        if not 0 < self.obstacle.size_min <= self.obstacle.size_max:
            raise ValueError(
                f"obstacle sizes must satisfy 0 < size_min <= size_max, "
                f"got {self.obstacle.size_min}..{self.obstacle.size_max}"
            )
        if self.obstacle.vel_min > self.obstacle.vel_max:
            raise ValueError(
                f"obstacle.vel_min must not exceed vel_max, got {self.obstacle.vel_min}..{self.obstacle.vel_max}"
            )
        if self.player_hit.flash_freq <= 0 or self.player_hit.invulnerability_flash_freq <= 0:
            raise ValueError("flash frequencies must be positive")
