"""
G-force peak meter

Shows the strongest recent acceleration peak for a few seconds and keeps
an all-time record in persistent storage.
"""

import logging

from ..storage.preferences import Preferences
from ..utils.constants import (
    BLACK, WHITE, GREEN, RED, YELLOW, DARKGREY, FOOTER_GREY,
    CENTER_X, SCREEN_WIDTH,
    PEAK_THRESHOLD_G, PEAK_DECAY_MS, PEAK_RESET_KEY, PREFS_KEY_HIGH_G,
)
from ..visualization.frame import Frame
from .base import Mode, ModeBase, ModeUpdate, TickInput

logger = logging.getLogger(__name__)


class PeakTracker:
    """
    Peak detection with a decaying hold window

    current_max/peak_time_ms are volatile. all_time_high_g is written to the
    preferences store whenever it grows or is reset, and only a reset can
    lower it.
    """

    def __init__(self, prefs: Preferences, key: str = PREFS_KEY_HIGH_G):
        self.prefs = prefs
        self.key = key
        self.current_max = 0.0
        self.peak_time_ms = 0
        self.all_time_high_g = prefs.get_float(key, 0.0)

    @property
    def tracking(self) -> bool:
        """True while a peak is being held on screen"""
        return self.current_max > 0.0

    def record(self, force: float, now_ms: int) -> None:
        """Register the force measured at now_ms"""
        if force > PEAK_THRESHOLD_G and force > self.current_max:
            self.current_max = force
            self.peak_time_ms = now_ms
            if self.current_max > self.all_time_high_g:
                self.all_time_high_g = self.current_max
                self.prefs.put_float(self.key, self.all_time_high_g)
                logger.info(f"New all-time peak {self.all_time_high_g:.2f}G")

    def reset(self) -> None:
        """Zero the current and all-time peaks"""
        self.all_time_high_g = 0.0
        self.current_max = 0.0
        self.prefs.put_float(self.key, 0.0)

    def decay(self, now_ms: int) -> None:
        """Drop the held peak once it is below threshold or too old"""
        if (self.current_max < PEAK_THRESHOLD_G
                or now_ms - self.peak_time_ms > PEAK_DECAY_MS):
            self.current_max = 0.0

    def elapsed_ms(self, now_ms: int) -> int:
        return now_ms - self.peak_time_ms


def countdown_width(elapsed_ms: int) -> int:
    """Bar shrinking from full width to zero over the decay window"""
    elapsed_ms = min(max(elapsed_ms, 0), PEAK_DECAY_MS)
    return SCREEN_WIDTH - elapsed_ms * SCREEN_WIDTH // PEAK_DECAY_MS


class LaunchMode(ModeBase):
    mode = Mode.LAUNCH

    def __init__(self, tracker: PeakTracker):
        self.tracker = tracker

    def update(self, tick: TickInput) -> ModeUpdate:
        tracker = self.tracker
        force = tick.sample.force

        tracker.record(force, tick.now_ms)
        if tick.keys.is_key_down(PEAK_RESET_KEY):
            tracker.reset()
        tracker.decay(tick.now_ms)

        frame = Frame()
        frame.fill_screen(BLACK)
        frame.text(5, 5, f"ALL-TIME RECORD: {tracker.all_time_high_g:.2f}G", YELLOW)
        frame.hline(0, 18, SCREEN_WIDTH, DARKGREY)

        if not tracker.tracking:
            frame.text(CENTER_X, 55, "Ready for G-force", WHITE, size=2, align="center")
        else:
            color = GREEN if tracker.current_max >= tracker.all_time_high_g else RED
            frame.text(CENTER_X, 35, "Peak Force", color, size=2, align="center")
            frame.text(30, 65, f"{tracker.current_max:.2f}G", color, size=5)
            bar = countdown_width(tracker.elapsed_ms(tick.now_ms))
            frame.fill_rect(0, 130, bar, 5, GREEN)

        frame.hline(0, 115, SCREEN_WIDTH, FOOTER_GREY)
        frame.text(5, 122, f"Live:{force:.2f}G (1.00 = Gravity)", DARKGREY)
        frame.text(235, 122, "R = Reset", DARKGREY, align="right")
        return ModeUpdate(frame=frame)
