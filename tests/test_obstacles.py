import math
import random

import pytest

from pixeldodge.models import ObstacleConfig
from pixeldodge.obstacle import Obstacle
from pixeldodge.spawner import Spawner
from pixeldodge.vector import Vector2D

AREA = Vector2D(10, 10)


def test_render_offset_is_fixed_at_spawn():
    obstacle = Obstacle(3, Vector2D(4.3, -2.8), Vector2D(1.7, 0.9))
    offset = obstacle.render_offset
    assert offset.x == pytest.approx(0.3) and offset.y == pytest.approx(0.2)
    for _ in range(25):
        obstacle.update(0.37)
        assert obstacle.render_offset == offset
        assert obstacle.render_position() == Vector2D.add(obstacle.position.rounded(), offset)


def test_render_position_stays_within_half_a_cell():
    obstacle = Obstacle(3, Vector2D(0.4, 0.4), Vector2D(1.3, -0.6))
    for _ in range(40):
        obstacle.update(0.1)
        diff = Vector2D.add(obstacle.render_position(), obstacle.position.negate())
        assert abs(diff.x) <= 1 and abs(diff.y) <= 1


@pytest.mark.parametrize("position, velocity, gone", [
    (Vector2D(12, 5), Vector2D(1, 0), True),
    (Vector2D(12, 5), Vector2D(-1, 0), False),
    (Vector2D(-2.5, 5), Vector2D(-1, 0), True),
    (Vector2D(-2.5, 5), Vector2D(1, 0), False),
    (Vector2D(5, 12), Vector2D(0, 1), True),
    (Vector2D(5, -3), Vector2D(0, -1), True),
    (Vector2D(5, -3), Vector2D(0, 0), False),
    (Vector2D(11, 5), Vector2D(1, 0), False),
])
def test_culling_only_when_outside_and_moving_away(position, velocity, gone):
    assert Obstacle(2, position, velocity).is_gone(AREA) is gone


def test_collision_is_strict_on_the_radius():
    obstacle = Obstacle(4, Vector2D(5, 5), Vector2D(0, 0))
    assert obstacle.collides_with(Vector2D(5, 5))
    assert obstacle.collides_with(Vector2D(6.9, 5))
    assert not obstacle.collides_with(Vector2D(7, 5))
    assert not obstacle.collides_with(Vector2D(6.5, 6.5))
    assert Obstacle(0.01, Vector2D(1, 1), Vector2D(0, 0)).collides_with(Vector2D(1, 1))


def test_spawn_at_angle_zero_lands_outside_the_area(monkeypatch):
    monkeypatch.setattr(random, "random", lambda: 0.0)
    spawner = Spawner(ObstacleConfig(size_min=2, size_max=2, vel_min=3, vel_max=3), AREA)
    obstacle = spawner.spawn_obstacle(theta=0)
    assert obstacle.position == Vector2D(15, 5)
    assert obstacle.size == 2
    assert obstacle.velocity.r() == pytest.approx(3)
    # heading at theta + 0.75 pi when the spread draw is 0
    assert obstacle.velocity.theta() == pytest.approx(0.75 * math.pi)


def test_spawn_distance_and_ranges():
    spawner = Spawner(ObstacleConfig(size_min=1, size_max=4, vel_min=2, vel_max=5), Vector2D(30, 12))
    for _ in range(200):
        obstacle = spawner.spawn_obstacle()
        centre_offset = Vector2D.add(obstacle.position, Vector2D(-15, -6))
        assert centre_offset.r() == pytest.approx(30)
        assert 1 <= obstacle.size <= 4
        assert 2 - 1e-9 <= obstacle.velocity.r() <= 5 + 1e-9
        # heading points back across the centre, between 0.75 pi and 1.25 pi from the spawn angle
        turn = (obstacle.velocity.theta() - centre_offset.theta()) % (2 * math.pi)
        assert 0.75 * math.pi - 1e-9 <= turn <= 1.25 * math.pi + 1e-9


def test_countdown_spawns_and_catches_up():
    spawner = Spawner(ObstacleConfig(spawn_freq=0.5), AREA)
    obstacles = []
    assert spawner.update(0.0, obstacles) == 1
    assert spawner.next_spawn_in == pytest.approx(0.5)
    assert spawner.update(0.2, obstacles) == 0
    assert spawner.update(1.4, obstacles) == 3
    assert len(obstacles) == 4
    assert spawner.next_spawn_in == pytest.approx(0.4)
