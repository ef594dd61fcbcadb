"""
Mode selection menu
"""

from ..utils.constants import BLACK, GREEN
from ..visualization.frame import Frame
from .base import Mode, ModeBase, ModeUpdate, TickInput

# Checked in this order; the first key held down wins
MENU_ENTRIES = (
    ("1", Mode.CUBE, "1. 3D Cube"),
    ("2", Mode.LEVEL, "2. Bubble Level"),
    ("3", Mode.GAME, "3. Tilt Game"),
    ("4", Mode.LAUNCH, "4. G-Force Mode"),
    ("5", Mode.GRAPH, "5. IMU Graph"),
    ("6", Mode.RAW, "6. Raw Viewer"),
)


class MenuMode(ModeBase):
    mode = Mode.MENU

    def update(self, tick: TickInput) -> ModeUpdate:
        frame = Frame()
        frame.fill_screen(BLACK)
        frame.text(10, 10, "IMU Demo Menu", GREEN, size=2)
        y = 40
        for _, _, label in MENU_ENTRIES:
            frame.text(10, y, label, GREEN)
            y += 15

        for key, target, _ in MENU_ENTRIES:
            if tick.keys.is_key_down(key):
                return ModeUpdate(frame=frame, transition=target)
        return ModeUpdate(frame=frame)
