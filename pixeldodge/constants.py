"""
Default tuning knobs: frame rate, play-area size, pixel scale, steering,
obstacle spawn ranges, hit/respawn timings, blink tuning, colors and the
gameplay log location.
"""

import os

FPS = 60
PLAY_AREA_WIDTH, PLAY_AREA_HEIGHT = 64, 48      # grid cells
PIXEL_SCALE = 10                                # raw pixels per grid cell
MOUSE_PULL = 20.0                               # pull per second per cell of distance

# Obstacles (seconds, grid cells, cells per second)
OBSTACLE_SPAWN_FREQ = 0.6
OBSTACLE_SIZE_MIN = 2.0
OBSTACLE_SIZE_MAX = 7.0
OBSTACLE_VEL_MIN = 6.0
OBSTACLE_VEL_MAX = 18.0

# Hit / respawn (seconds)
HIT_FLASH_FREQ = 0.1
HIT_FLASH_DURATION = 0.4
RESPAWN_TIME = 1.5
INVULNERABILITY_DURATION = 2.0
INVULNERABILITY_FLASH_FREQ = 0.2

# Blink
BLINK_DISTANCE = 8.0
BLINK_DURATION = 0.12
BLINK_COOLDOWN = 1.0

FG_COLOR = (235, 235, 235)
BG_COLOR = (25, 28, 33)

HUD_HEIGHT = 9                                  # grid cells below the play-area border
SCORE_CHARS = 7

WINDOW_CAPTION = "Pixel Dodge"
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
