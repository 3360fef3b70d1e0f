"""Markdown logger for gameplay events (hits, respawns, blinks)."""

import datetime

from .vector import Vector2D


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Pixel Dodge Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Event | Position (x,y) | Details |\n")
                f.write("|-----------|-------|----------------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, pos: Vector2D | None, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            where = f"({pos.x:.1f}, {pos.y:.1f})" if pos is not None else "-"

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {where} | {details} |\n")

        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_session_start(self, play_area_size: Vector2D) -> None:
        self._write_row("START", None, f"Play area {play_area_size.x:g}x{play_area_size.y:g}")

    def log_hit(self, pos: Vector2D, score: float) -> None:
        """
        Log the player being hit.

        Parameters
        ----------
        pos : Vector2D
            Player position at the moment of the hit
        score : float
            Seconds survived in the life that just ended
        """
        self._write_row("HIT", pos, f"Survived {score:.1f}s")

    def log_respawn(self, pos: Vector2D) -> None:
        self._write_row("RESPAWN", pos, "")

    def log_blink(self, start: Vector2D, end: Vector2D) -> None:
        self._write_row("BLINK", start, f"to ({end.x:.1f}, {end.y:.1f})")
