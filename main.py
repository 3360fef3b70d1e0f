"""Game entry point"""

from __future__ import annotations

import pygame

from pixeldodge.constants import LOG_FILE, WINDOW_CAPTION
from pixeldodge.game import Game
from pixeldodge.host import HostSurface
from pixeldodge.logger import GameLogger
from pixeldodge.models import GameConfig


def main() -> None:
    """Open the window, play until the window is closed or ESC is pressed."""
    pygame.init()
    config = GameConfig.default()
    host = HostSurface.create_window(Game.raw_size(config), WINDOW_CAPTION)
    pygame.mouse.set_visible(False)
    game = Game(host, config, GameLogger(LOG_FILE))
    try:
        game.run()
    finally:
        game.destroy()
        pygame.quit()


if __name__ == "__main__":
    main()
