"""
Raw sensor readout
"""

from ..fusion.tilt import estimate_orientation
from ..utils.constants import BLACK, GREEN, RED, BLUE, YELLOW, RAW_RULE_GREEN, SCREEN_WIDTH
from ..visualization.frame import Frame
from .base import Mode, ModeBase, ModeUpdate, TickInput


class RawMode(ModeBase):
    mode = Mode.RAW

    def update(self, tick: TickInput) -> ModeUpdate:
        ax, ay, az = tick.sample.accel
        gx, gy, gz = tick.sample.gyro
        orientation = estimate_orientation(tick.sample)

        frame = Frame()
        frame.fill_screen(BLACK)
        frame.text(5, 5, "IMU SENSOR DATA", GREEN, size=2)
        frame.hline(0, 25, SCREEN_WIDTH, RAW_RULE_GREEN)

        top = 35
        frame.text(5, top, "ACCEL [G]", RED)
        frame.text(5, top + 10, f"X: {ax:+6.2f}", RED)
        frame.text(5, top + 20, f"Y: {ay:+6.2f}", RED)
        frame.text(5, top + 30, f"Z: {az:+6.2f}", RED)

        frame.text(120, top, "GYRO [deg/s]", BLUE)
        frame.text(120, top + 10, f"X: {gx:+7.1f}", BLUE)
        frame.text(120, top + 20, f"Y: {gy:+7.1f}", BLUE)
        frame.text(120, top + 30, f"Z: {gz:+7.1f}", BLUE)

        frame.text(
            5, 115,
            f"PITCH: {orientation.pitch_degrees:6.1f} deg  "
            f"ROLL: {orientation.roll_degrees:6.1f} deg",
            YELLOW,
        )
        return ModeUpdate(frame=frame)
