"""
Visualization modes for Motion Lab
"""

from .base import (
    Mode, VISUALIZATION_MODES, KeySnapshot, TickInput, ModeUpdate, ModeBase,
)
from .splash import SplashMode
from .menu import MenuMode, MENU_ENTRIES
from .cube import CubeMode, ZoomControl
from .level import LevelMode
from .game import GameMode, GameState, GameTuning
from .launch import LaunchMode, PeakTracker
from .graph import GraphMode, GraphRingBuffer
from .raw import RawMode

__all__ = [
    'Mode',
    'VISUALIZATION_MODES',
    'KeySnapshot',
    'TickInput',
    'ModeUpdate',
    'ModeBase',
    'SplashMode',
    'MenuMode',
    'MENU_ENTRIES',
    'CubeMode',
    'ZoomControl',
    'LevelMode',
    'GameMode',
    'GameState',
    'GameTuning',
    'LaunchMode',
    'PeakTracker',
    'GraphMode',
    'GraphRingBuffer',
    'RawMode',
]
