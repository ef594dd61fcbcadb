"""
Scrolling accelerometer graph

Samples go into a fixed-size ring buffer; drawing walks it from the oldest
entry (at the write cursor) to the newest so the trace scrolls left.
"""

import numpy as np

from ..utils.constants import (
    BLACK, RED, GREEN, BLUE, FOOTER_GREY, CENTER_Y, SCREEN_WIDTH,
    GRAPH_CAPACITY, GRAPH_PIXELS_PER_G,
)
from ..visualization.frame import Frame
from .base import Mode, ModeBase, ModeUpdate, TickInput


class GraphRingBuffer:
    """
    Three per-axis circular buffers sharing one write cursor

    Storage is allocated once; writes overwrite the oldest slot.
    """

    def __init__(self, capacity: int = GRAPH_CAPACITY):
        self.capacity = capacity
        self.data = np.zeros((3, capacity), dtype=np.float64)
        self.cursor = 0

    def push(self, x: float, y: float, z: float) -> None:
        """Write one sample at the cursor and advance it"""
        self.data[0, self.cursor] = x
        self.data[1, self.cursor] = y
        self.data[2, self.cursor] = z
        self.cursor = (self.cursor + 1) % self.capacity

    def axis(self, index: int) -> np.ndarray:
        """One axis in chronological order, oldest first"""
        return np.roll(self.data[index], -self.cursor)

    def chronological(self) -> np.ndarray:
        """(3, capacity) copy, oldest sample in column 0"""
        return np.roll(self.data, -self.cursor, axis=1)


class GraphMode(ModeBase):
    mode = Mode.GRAPH

    AXIS_COLORS = (RED, GREEN, BLUE)

    def __init__(self, buffer: GraphRingBuffer = None):
        self.buffer = buffer if buffer is not None else GraphRingBuffer()

    def update(self, tick: TickInput) -> ModeUpdate:
        ax, ay, az = tick.sample.accel
        self.buffer.push(ax, ay, az)

        frame = Frame()
        frame.fill_screen(BLACK)
        frame.line(0, CENTER_Y, SCREEN_WIDTH, CENTER_Y, FOOTER_GREY)

        traces = CENTER_Y - self.buffer.chronological() * GRAPH_PIXELS_PER_G
        for i in range(self.buffer.capacity - 1):
            for axis, color in enumerate(self.AXIS_COLORS):
                frame.line(i, traces[axis, i], i + 1, traces[axis, i + 1], color)
        return ModeUpdate(frame=frame)
