"""Game shell and the per-life simulation loop."""

from __future__ import annotations

from typing import Callable

import pygame

from .constants import HUD_HEIGHT
from .events import PixelMouseEvent
from .host import HostSurface, SurfaceError
from .hud import HUD
from .logger import GameLogger
from .models import GameConfig, PlayerHitConfig
from .obstacle import Obstacle
from .pixel_canvas import PixelCanvas
from .player import Player
from .spawner import Spawner
from .vector import Vector2D


def compute_canvas_size(config: GameConfig) -> Vector2D:
    """Play area plus a one-cell border on each side plus the HUD strip, in cells."""
    return Vector2D(config.play_area_size.x + 2, config.play_area_size.y + 2 + HUD_HEIGHT)


def should_flash_background(t: float, hit_at: float | None, hit: PlayerHitConfig) -> bool:
    """Square-wave background flash for ``flash_duration`` seconds after a hit."""
    if hit_at is None:
        return False
    time_since_hit = t - hit_at
    return time_since_hit < hit.flash_duration and time_since_hit % hit.flash_freq < 0.5 * hit.flash_freq


def should_hide_player(t: float, hit_at: float | None, invulnerability_until: float, hit: PlayerHitConfig) -> bool:
    """Hidden while waiting to respawn; blinking on and off while invulnerable."""
    if hit_at is not None:
        return True
    if t < invulnerability_until:
        freq = hit.invulnerability_flash_freq
        return (invulnerability_until - t) % freq < 0.5 * freq
    return False


def clamp_to_play_area(position: Vector2D, play_area_size: Vector2D) -> Vector2D:
    """Map the inclusive upper boundary onto the last drawable cell."""
    return Vector2D(
        play_area_size.x - 1 if position.x == play_area_size.x else position.x,
        play_area_size.y - 1 if position.y == play_area_size.y else position.y,
    )


class Game:
    """
    Owns the root pixel canvas for a host surface and runs at most one
    GameInstance on it.
    """

    def __init__(self, host: HostSurface, config: GameConfig, logger: GameLogger | None = None) -> None:
        config.validate()
        self.host = host
        self.config = config
        self.logger = logger

        canvas_size = compute_canvas_size(config)
        raw_size = canvas_size.scale(config.pixel_scale)
        if host.surface is None:
            raise SurfaceError("Could not get a drawable surface from the host")
        w, h = host.size()
        if w < raw_size.x or h < raw_size.y:
            raise SurfaceError(f"Host surface {w}x{h} is smaller than the {raw_size.x:g}x{raw_size.y:g} game canvas")
        self.pixel_canvas = PixelCanvas(host, Vector2D(0, 0), canvas_size, config.pixel_scale)
        self.instance: GameInstance | None = None

    @classmethod
    def raw_size(cls, config: GameConfig) -> tuple[int, int]:
        size = compute_canvas_size(config).scale(config.pixel_scale)
        return int(size.x), int(size.y)

    def destroy(self) -> None:
        if self.instance is not None:
            self.instance.destroy()
            self.instance = None
        self.pixel_canvas.destroy()

    def start(self) -> GameInstance:
        if self.instance is None:
            self.instance = GameInstance(self.pixel_canvas, self.config, self.logger)
        return self.instance

    def run(self) -> None:
        """Blocks until the instance stops (quit event or ``stop()``)."""
        instance = self.start()
        if not instance.running:
            instance.run()


class GameInstance:
    """
    One play session: the avatar, the obstacles, the score and the hit /
    respawn state machine.

    Parameters
    ----------
    canvas : PixelCanvas
        Root canvas; the play area is carved out of it one cell in from the
        top-left corner.
    config : GameConfig
    logger : GameLogger | None
    clock : Callable[[], int], optional
        Milliseconds since some fixed point.
    delay_ms : Callable[[int], object], optional
        Suspends the caller for at least the given milliseconds.
    """

    def __init__(self, canvas: PixelCanvas, config: GameConfig, logger: GameLogger | None = None,
                 clock: Callable[[], int] = pygame.time.get_ticks,
                 delay_ms: Callable[[int], object] = pygame.time.wait) -> None:
        self.config = config
        self.canvas = canvas
        self.play_area_canvas = canvas.sub_canvas(Vector2D(1, 1), config.play_area_size)
        self.hud = HUD(canvas, config.play_area_size)
        self.logger = logger
        self.clock = clock
        self.delay_ms = delay_ms

        self.player = Player(config.play_area_size.scale(0.5), config.blink.duration)
        self.score = 0.0
        self.obstacles: list[Obstacle] = []
        self.spawner = Spawner(config.obstacle, config.play_area_size)
        self.player_hit_at: float | None = None
        self.player_spawn_at = 0.0
        self.pending_blink: Vector2D | None = None
        self.running = False
        self.started = False

        self.start_ms = 0.0
        self.last_t = 0.0

        self._quit_handle = canvas.host.add_event_listener("quit", lambda event: self.stop())
        self._press_handle = self.play_area_canvas.add_mouse_down_listener(self.request_blink)

    # ------------------------------- Lifecycle ----------------------------------------

    def destroy(self) -> None:
        self.running = False
        self.canvas.host.remove_event_listener(self._quit_handle)
        self.play_area_canvas.destroy()
        self.canvas.destroy()

    def stop(self) -> None:
        self.running = False

    def run(self) -> None:
        """Run until stopped; a second call resumes on the same timeline."""
        if self.logger is not None and not self.started:
            self.logger.log_session_start(self.config.play_area_size)
        self.started = True
        self.running = True
        self.start_ms = self.clock() - self.last_t * 1000

        while self.running:
            self.tick()
            self.delay_ms(int(1000 / self.config.fps))

    def tick(self) -> None:
        """One scheduler tick: input, simulation, rendering, present."""
        self.canvas.host.pump_events()
        if not self.running:
            return
        t = (self.clock() - self.start_ms) / 1000
        delta = t - self.last_t
        self.last_t = t

        self.game_loop(t, delta)
        self.canvas.host.present()

    def request_blink(self, event: PixelMouseEvent) -> None:
        # Consumed by the next frame
        self.pending_blink = event.position

    # ------------------------------- Simulation ---------------------------------------

    def game_loop(self, t: float, delta: float) -> None:
        if self.player_hit_at is None:
            self.move_player(t, delta)
        else:
            self.pending_blink = None
            if self.player_hit_at + self.config.player_hit.respawn_time < t:
                self.respawn(t)

        self.spawner.update(delta, self.obstacles)
        self.move_obstacles(delta)
        self.detect_collisions(t)
        self.update_score(t)
        self.render(t)

    def move_player(self, t: float, delta: float) -> None:
        player = self.player
        play_area_size = self.config.play_area_size

        if self.pending_blink is not None:
            if player.can_blink(t, self.config.blink.cooldown):
                blink = player.blink_towards(t, self.pending_blink, self.config.blink.distance, play_area_size)
                if self.logger is not None:
                    self.logger.log_blink(blink.start_pos, blink.end_pos)
            self.pending_blink = None

        mouse_pos = self.play_area_canvas.mouse_pos()
        if mouse_pos is not None:
            vec_to_mouse = Vector2D.add(mouse_pos, player.position.negate())
            player.velocity = Vector2D.add(player.velocity, vec_to_mouse.scale(self.config.mouse_pull * delta))
        player.position = Vector2D.add(player.position, player.velocity.scale(delta))

        # Inelastic bounce, only while still heading out of the field
        if player.position.x < 0:
            player.position = Vector2D(0, player.position.y)
            if player.velocity.x < 0:
                player.velocity = Vector2D(player.velocity.x * -0.5, player.velocity.y)
        elif player.position.x >= play_area_size.x:
            player.position = Vector2D(play_area_size.x, player.position.y)
            if player.velocity.x > 0:
                player.velocity = Vector2D(player.velocity.x * -0.5, player.velocity.y)

        if player.position.y < 0:
            player.position = Vector2D(player.position.x, 0)
            if player.velocity.y < 0:
                player.velocity = Vector2D(player.velocity.x, player.velocity.y * -0.5)
        elif player.position.y >= play_area_size.y:
            player.position = Vector2D(player.position.x, play_area_size.y)
            if player.velocity.y > 0:
                player.velocity = Vector2D(player.velocity.x, player.velocity.y * -0.5)

    def respawn(self, t: float) -> None:
        position = self.play_area_canvas.last_mouse_pos()
        if position is None:
            position = self.config.play_area_size.scale(0.5)
        self.player.respawn(position)
        self.player_hit_at = None
        self.player_spawn_at = t
        self.obstacles = []
        if self.logger is not None:
            self.logger.log_respawn(position)

    def move_obstacles(self, delta: float) -> None:
        for obstacle in self.obstacles:
            obstacle.update(delta)
        self.obstacles = [o for o in self.obstacles if not o.is_gone(self.config.play_area_size)]

    def detect_collisions(self, t: float) -> None:
        if self.player.invulnerable(t):
            return
        for obstacle in self.obstacles:
            if obstacle.collides_with(self.player.position):
                self.player_hit_at = t
                self.player.invulnerability_until = (
                    t + self.config.player_hit.respawn_time + self.config.player_hit.invulnerability_duration
                )
                if self.logger is not None:
                    self.logger.log_hit(self.player.position, t - self.player_spawn_at)
                return

    def update_score(self, t: float) -> None:
        if self.player_hit_at is not None:
            self.score = self.player_hit_at - self.player_spawn_at
        else:
            self.score = t - self.player_spawn_at

    # ------------------------------- Rendering ----------------------------------------

    def render(self, t: float) -> None:
        fg = self.config.colors.fg
        bg = self.config.colors.bg
        hit_config = self.config.player_hit
        canvas = self.play_area_canvas

        canvas.clear(fg if should_flash_background(t, self.player_hit_at, hit_config) else bg)

        for obstacle in self.obstacles:
            canvas.fill_circle(obstacle.render_position(), obstacle.size / 2, fg)

        player = self.player
        if self.player_hit_at is None and player.blinking(t):
            blink = player.last_blink
            canvas.draw_line(
                clamp_to_play_area(blink.start_pos, self.config.play_area_size),
                clamp_to_play_area(blink.end_pos, self.config.play_area_size),
                fg,
            )

        if not should_hide_player(t, self.player_hit_at, player.invulnerability_until, hit_config):
            canvas.draw_pixel(clamp_to_play_area(player.position, self.config.play_area_size), fg)

        self.hud.draw(self.score, fg, bg)
