"""
Simulated IMU source

Produces a slow, deterministic wobble around the flat position plus a short
shake every few seconds, so every mode (including the G-force meter) can be
exercised without hardware.
"""

import math
import time
from typing import Callable, Optional

from ..data.sensor_data import SensorSample, Vector3
from .base import IMUSource


class SimulatedIMU(IMUSource):
    """Synthetic accelerometer/gyroscope driven by a clock"""

    PITCH_AMPLITUDE = 0.5  # rad
    ROLL_AMPLITUDE = 0.4  # rad
    PITCH_RATE = 0.7  # rad/s
    ROLL_RATE = 0.45  # rad/s

    def __init__(self, clock: Optional[Callable[[], float]] = None,
                 shake_period: float = 8.0, shake_duration: float = 0.15,
                 shake_g: float = 2.5):
        """
        Args:
            clock: seconds source (default time.monotonic)
            shake_period: seconds between shakes (0 disables shaking)
            shake_duration: length of each shake in seconds
            shake_g: acceleration magnitude during a shake
        """
        self.clock = clock if clock is not None else time.monotonic
        self.shake_period = shake_period
        self.shake_duration = shake_duration
        self.shake_g = shake_g
        self._t0 = None

    def begin(self) -> bool:
        self._t0 = self.clock()
        return True

    def _elapsed(self) -> float:
        if self._t0 is None:
            self._t0 = self.clock()
        return self.clock() - self._t0

    def _angles(self, t: float):
        pitch = self.PITCH_AMPLITUDE * math.sin(self.PITCH_RATE * t)
        roll = self.ROLL_AMPLITUDE * math.sin(self.ROLL_RATE * t)
        return pitch, roll

    def _shaking(self, t: float) -> bool:
        if self.shake_period <= 0:
            return False
        return (t % self.shake_period) > (self.shake_period - self.shake_duration)

    def read_accel(self) -> Vector3:
        t = self._elapsed()
        pitch, roll = self._angles(t)

        # Gravity vector for the given tilt
        ax = -math.sin(roll)
        ay = math.cos(roll) * math.sin(pitch)
        az = math.cos(roll) * math.cos(pitch)

        if self._shaking(t):
            scale = self.shake_g
            return (ax * scale, ay * scale, az * scale)
        return (ax, ay, az)

    def read_gyro(self) -> Vector3:
        t = self._elapsed()
        pitch_rate = self.PITCH_AMPLITUDE * self.PITCH_RATE * math.cos(self.PITCH_RATE * t)
        roll_rate = self.ROLL_AMPLITUDE * self.ROLL_RATE * math.cos(self.ROLL_RATE * t)
        return (math.degrees(pitch_rate), math.degrees(roll_rate), 0.0)

    def read_sample(self) -> SensorSample:
        return SensorSample(accel=self.read_accel(), gyro=self.read_gyro())
