from __future__ import annotations

import math
import random

from .models import ObstacleConfig
from .obstacle import Obstacle
from .vector import Vector2D


class Spawner:
    """
    Spawns obstacles on a fixed cadence from just outside the play area.

    Notes
    - Timing is a countdown driven by frame deltas, so a slow frame spawns
      every obstacle it skipped over (catch-up spawning).
    - Spawn points lie on a circle of radius max(width, height) around the
      play-area centre, which is always outside the visible field.
    """

    def __init__(self, config: ObstacleConfig, play_area_size: Vector2D) -> None:
        self.config = config
        self.play_area_size = play_area_size
        self.next_spawn_in = 0.0

    def spawn_obstacle(self, theta: float | None = None) -> Obstacle:
        """
        Build one obstacle.

        Parameters
        ----------
        theta : float | None
            Spawn angle around the play-area centre; random when omitted.
        """
        cfg = self.config
        if theta is None:
            theta = random.random() * math.pi * 2
        spawn_pos = Vector2D.add(
            Vector2D.from_polar(max(self.play_area_size.x, self.play_area_size.y), theta),
            self.play_area_size.scale(0.5),
        )
        speed = cfg.vel_min + random.random() * (cfg.vel_max - cfg.vel_min)
        # Head roughly back across the field with a quarter-turn of spread
        heading = theta + 0.75 * math.pi + 0.5 * math.pi * random.random()
        size = cfg.size_min + random.random() * (cfg.size_max - cfg.size_min)
        return Obstacle(size, spawn_pos, Vector2D.from_polar(speed, heading))

    def update(self, delta: float, obstacles: list[Obstacle]) -> int:
        """Advance the countdown and append due obstacles; returns how many spawned."""
        spawned = 0
        self.next_spawn_in -= delta
        while self.next_spawn_in <= 0:
            obstacles.append(self.spawn_obstacle())
            self.next_spawn_in += self.config.spawn_freq
            spawned += 1
        return spawned
