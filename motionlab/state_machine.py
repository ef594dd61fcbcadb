"""
Mode state machine

Owns the application state and the active mode. One call to tick() is one
pass of sensor sample -> mode update -> frame; nothing here blocks.

Transitions:
    SPLASH -> MENU                after the splash timeout
    MENU   -> CUBE .. RAW         on the menu keys 1-6
    CUBE .. RAW -> MENU           on either exit key, before mode logic
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .modes.base import Mode, ModeBase, TickInput, VISUALIZATION_MODES
from .modes.cube import CubeMode, ZoomControl
from .modes.game import GameMode, GameTuning
from .modes.graph import GraphMode
from .modes.launch import LaunchMode, PeakTracker
from .modes.level import LevelMode
from .modes.menu import MenuMode
from .modes.raw import RawMode
from .modes.splash import SplashMode
from .storage.preferences import Preferences
from .utils.constants import EXIT_KEYS
from .visualization.frame import Frame

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Process-lifetime state shared across mode sessions

    Modes receive only the part they use: the cube gets the zoom, the
    G-force meter gets the peak tracker, the game gets the RNG.
    """
    zoom: ZoomControl
    peaks: PeakTracker
    rng: random.Random = field(default_factory=random.Random)
    game_tuning: GameTuning = field(default_factory=GameTuning)

    @classmethod
    def create(cls, prefs: Preferences, seed: Optional[int] = None,
               game_tuning: Optional[GameTuning] = None) -> 'AppState':
        return cls(
            zoom=ZoomControl(),
            peaks=PeakTracker(prefs),
            rng=random.Random(seed),
            game_tuning=game_tuning if game_tuning is not None else GameTuning(),
        )


class ModeStateMachine:
    """Dispatches ticks to the active mode and applies its transitions"""

    def __init__(self, state: AppState, initial: Mode = Mode.SPLASH):
        self.state = state
        self.current: Mode = initial
        self.active: ModeBase = self._create(initial)

    def _create(self, mode: Mode) -> ModeBase:
        """Fresh mode instance: volatile mode state starts clean on every entry"""
        if mode == Mode.SPLASH:
            return SplashMode()
        if mode == Mode.MENU:
            return MenuMode()
        if mode == Mode.CUBE:
            return CubeMode(self.state.zoom)
        if mode == Mode.LEVEL:
            return LevelMode()
        if mode == Mode.GAME:
            return GameMode(rng=self.state.rng, tuning=self.state.game_tuning)
        if mode == Mode.LAUNCH:
            return LaunchMode(self.state.peaks)
        if mode == Mode.GRAPH:
            return GraphMode()
        if mode == Mode.RAW:
            return RawMode()
        raise ValueError(f"Unknown mode: {mode!r}")

    def transition(self, target: Mode) -> None:
        logger.info(f"Mode {self.current.name} -> {target.name}")
        self.current = target
        self.active = self._create(target)

    def exit_requested(self, tick: TickInput) -> bool:
        return self.current in VISUALIZATION_MODES and tick.keys.any_down(EXIT_KEYS)

    def tick(self, tick: TickInput) -> Optional[Frame]:
        """
        Run one tick

        Returns:
            Frame to present, or None when the tick only changed mode
        """
        if self.exit_requested(tick):
            self.transition(Mode.MENU)
            return None

        result = self.active.update(tick)
        if result.transition is not None and result.transition != self.current:
            self.transition(result.transition)
        return result.frame
