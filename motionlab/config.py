"""Configuration dataclass for the Motion Lab application."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .serial.protocol import LineEnding
from .utils.constants import GAME_SPEED, GAME_GOAL_RADIUS


@dataclass
class AppConfig:
    imu: str = "simulated"            # "serial" or "simulated"
    serial_port: Optional[str] = None
    baud_rate: int = 115200
    line_ending: LineEnding = LineEnding.LF
    tick_ms: int = 14                 # QTimer interval
    window_scale: int = 3             # device pixels -> screen pixels
    prefs_dir: Optional[Path] = None  # None = per-user config dir
    game_speed: float = GAME_SPEED
    game_goal_radius: float = GAME_GOAL_RADIUS
    seed: Optional[int] = None        # goal placement RNG seed
