"""
Splash screen

Shown once at start-up, then hands over to the menu.
"""

from ..utils.constants import BLACK, GREEN, CENTER_X, SPLASH_DURATION_MS
from ..visualization.frame import Frame
from .base import Mode, ModeBase, ModeUpdate, TickInput


class SplashMode(ModeBase):
    mode = Mode.SPLASH

    def __init__(self):
        self.start_ms = None

    def update(self, tick: TickInput) -> ModeUpdate:
        if self.start_ms is None:
            self.start_ms = tick.now_ms

        frame = Frame()
        frame.fill_screen(BLACK)
        frame.text(CENTER_X, 30, "Cardputer ADV", GREEN, size=2, align="center")
        frame.text(CENTER_X, 60, "Motion Lab", GREEN, size=2, align="center")
        frame.text(CENTER_X, 100, "v0.5 - shake it up", GREEN, align="center")

        if tick.now_ms - self.start_ms > SPLASH_DURATION_MS:
            return ModeUpdate(frame=frame, transition=Mode.MENU)
        return ModeUpdate(frame=frame)
