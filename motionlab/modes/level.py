"""
Bubble level
"""

from ..utils.constants import (
    BLACK, YELLOW, GRID_BLUE, CENTER_X, CENTER_Y,
    SCREEN_WIDTH, SCREEN_HEIGHT, LEVEL_RADIUS, LEVEL_BUBBLE_RADIUS,
)
from ..visualization.frame import Frame
from .base import Mode, ModeBase, ModeUpdate, TickInput


def bubble_position(ax: float, ay: float):
    """Screen position of the bubble; 1 G of tilt reaches the ring"""
    return (CENTER_X + ax * LEVEL_RADIUS, CENTER_Y - ay * LEVEL_RADIUS)


class LevelMode(ModeBase):
    mode = Mode.LEVEL

    def update(self, tick: TickInput) -> ModeUpdate:
        bx, by = bubble_position(tick.sample.ax, tick.sample.ay)

        frame = Frame()
        frame.fill_screen(BLACK)
        frame.line(CENTER_X, 0, CENTER_X, SCREEN_HEIGHT, GRID_BLUE)
        frame.line(0, CENTER_Y, SCREEN_WIDTH, CENTER_Y, GRID_BLUE)
        frame.circle(CENTER_X, CENTER_Y, LEVEL_RADIUS, GRID_BLUE)
        frame.fill_circle(bx, by, LEVEL_BUBBLE_RADIUS, YELLOW)
        return ModeUpdate(frame=frame)
