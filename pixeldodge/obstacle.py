from __future__ import annotations

from .vector import Vector2D


class Obstacle:
    """
    A drifting disc the player has to avoid.

    ``render_offset`` is the sub-cell phase of the spawn position. It is
    fixed for the obstacle's lifetime and added to the rounded position when
    drawing, so the disc's outline does not wobble between frames.
    """

    def __init__(self, size: float, position: Vector2D, velocity: Vector2D) -> None:
        self.size = size
        self.position = position
        self.velocity = velocity
        self.render_offset = Vector2D.add(position, position.rounded().negate())

    def update(self, delta: float) -> None:
        self.position = Vector2D.add(self.position, self.velocity.scale(delta))

    def render_position(self) -> Vector2D:
        return Vector2D.add(self.position.rounded(), self.render_offset)

    def is_gone(self, play_area_size: Vector2D) -> bool:
        """True once fully outside the play area and still moving away from it."""
        if self.position.x < -self.size and self.velocity.x < 0:
            return True
        if self.position.x >= play_area_size.x + self.size and self.velocity.x > 0:
            return True
        if self.position.y < -self.size and self.velocity.y < 0:
            return True
        if self.position.y >= play_area_size.y + self.size and self.velocity.y > 0:
            return True
        return False

    def collides_with(self, point: Vector2D) -> bool:
        """Bounding-box rejection first, then the exact disc test."""
        half = 0.5 * self.size
        if not (self.position.x - half < point.x < self.position.x + half
                and self.position.y - half < point.y < self.position.y + half):
            return False
        return Vector2D.add(point, self.position.negate()).r() < half
