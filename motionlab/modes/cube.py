"""
3D wireframe cube

The cube follows the device tilt. Zoom is adjusted from the keyboard and
outlives individual cube sessions (it belongs to the application state).
"""

from ..fusion.tilt import estimate_orientation
from ..utils.constants import (
    BLACK, GREEN, DARKGREY, FOOTER_GREY, SCREEN_WIDTH,
    ZOOM_MIN, ZOOM_MAX, ZOOM_DEFAULT, ZOOM_RESET, ZOOM_STEP,
    ZOOM_IN_KEYS, ZOOM_OUT_KEYS, ZOOM_RESET_KEY,
)
from ..utils.utilities import clamp
from ..visualization.frame import Frame
from ..visualization.transforms import CUBE_EDGES, project_cube
from .base import KeySnapshot, Mode, ModeBase, ModeUpdate, TickInput


class ZoomControl:
    """Projection scale kept within [ZOOM_MIN, ZOOM_MAX]"""

    def __init__(self, scale: float = ZOOM_DEFAULT):
        self.scale = clamp(scale, ZOOM_MIN, ZOOM_MAX)

    def zoom_in(self):
        self.scale = clamp(self.scale + ZOOM_STEP, ZOOM_MIN, ZOOM_MAX)

    def zoom_out(self):
        self.scale = clamp(self.scale - ZOOM_STEP, ZOOM_MIN, ZOOM_MAX)

    def reset(self):
        self.scale = ZOOM_RESET

    def apply_keys(self, keys: KeySnapshot):
        """Held keys repeat every tick"""
        if keys.any_down(ZOOM_IN_KEYS):
            self.zoom_in()
        if keys.any_down(ZOOM_OUT_KEYS):
            self.zoom_out()
        if keys.is_key_down(ZOOM_RESET_KEY):
            self.reset()


class CubeMode(ModeBase):
    mode = Mode.CUBE

    def __init__(self, zoom: ZoomControl):
        self.zoom = zoom

    def update(self, tick: TickInput) -> ModeUpdate:
        self.zoom.apply_keys(tick.keys)

        orientation = estimate_orientation(tick.sample)
        pts = project_cube(orientation, self.zoom.scale)

        frame = Frame()
        frame.fill_screen(BLACK)
        for a, b in CUBE_EDGES:
            frame.line(pts[a][0], pts[a][1], pts[b][0], pts[b][1], GREEN)

        frame.hline(0, 115, SCREEN_WIDTH, FOOTER_GREY)
        frame.text(5, 122, "Zoom:+/- | Reset:0", DARKGREY)
        frame.text(235, 122, f"Scale: {int(self.zoom.scale)}", DARKGREY, align="right")
        return ModeUpdate(frame=frame)
