from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector2D


@dataclass(frozen=True)
class Blink:
    """One blink: when it started, its heading and the jump endpoints."""
    t: float
    angle: float
    start_pos: Vector2D
    end_pos: Vector2D


class Player:
    """
    The avatar steered by the pointer.

    Lifecycle of one life:
    - ACTIVE:   pulled towards the pointer, bounces off the play-area edges.
    - HIT WAIT: frozen and hidden until the respawn delay has passed.

    ``invulnerability_until`` survives respawn so the grace window granted at
    the hit covers the first seconds of the next life.
    """

    def __init__(self, position: Vector2D, blink_duration: float = 0.0) -> None:
        self.position = position
        self.velocity = Vector2D(0, 0)
        self.invulnerability_until = 0.0
        self.last_blink: Blink | None = None
        self.blink_duration = blink_duration

    def respawn(self, position: Vector2D) -> None:
        self.position = position
        self.velocity = Vector2D(0, 0)
        self.last_blink = None

    def blinking(self, time: float) -> bool:
        return self.last_blink is not None and time < self.last_blink.t + self.blink_duration

    def invulnerable(self, time: float) -> bool:
        return self.invulnerability_until > time or self.blinking(time)

    def can_blink(self, time: float, cooldown: float) -> bool:
        return self.last_blink is None or time - self.last_blink.t >= cooldown

    def blink_towards(self, time: float, target: Vector2D, distance: float, bounds: Vector2D) -> Blink:
        """Jump ``distance`` cells towards ``target``, staying inside ``bounds``."""
        angle = Vector2D.add(target, self.position.negate()).theta()
        end = Vector2D.add(self.position, Vector2D.from_polar(distance, angle))
        end = Vector2D(min(max(end.x, 0), bounds.x), min(max(end.y, 0), bounds.y))
        self.last_blink = Blink(time, angle, self.position, end)
        self.position = end
        return self.last_blink
