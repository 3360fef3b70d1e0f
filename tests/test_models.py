import dataclasses

import pytest

from pixeldodge.models import GameConfig, ObstacleConfig, PlayerHitConfig
from pixeldodge.vector import Vector2D


def test_defaults_are_valid_and_frozen():
    config = GameConfig.default()
    config.validate()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.fps = 30
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.obstacle.size_min = 1


@pytest.mark.parametrize("changes", [
    {"fps": 0},
    {"pixel_scale": -1},
    {"play_area_size": Vector2D(0, 10)},
    {"obstacle": ObstacleConfig(spawn_freq=0)},
    {"obstacle": ObstacleConfig(size_min=5, size_max=2)},
    {"obstacle": ObstacleConfig(size_min=0, size_max=2)},
    {"obstacle": ObstacleConfig(vel_min=9, vel_max=1)},
    {"player_hit": PlayerHitConfig(flash_freq=0)},
    {"player_hit": PlayerHitConfig(invulnerability_flash_freq=-1)},
])
def test_validate_rejects_unusable_settings(changes):
    with pytest.raises(ValueError):
        dataclasses.replace(GameConfig.default(), **changes).validate()
