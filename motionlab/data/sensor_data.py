"""
Sensor data structures

- SensorSample: one accelerometer/gyroscope snapshot per tick
- Orientation: pitch/roll estimate derived from a sample
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..utils.constants import G_PER_COUNT, DEG_PER_SEC_PER_COUNT

Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class SensorSample:
    """
    Linear acceleration (G) and angular rate (deg/s) for one tick

    Ephemeral: a new sample is read from the IMU source every tick.
    """
    accel: Vector3 = (0.0, 0.0, 1.0)
    gyro: Vector3 = (0.0, 0.0, 0.0)

    @classmethod
    def from_counts(cls, counts: Sequence[int]) -> 'SensorSample':
        """
        Build a sample from raw line protocol counts

        Args:
            counts: at least 6 int16 values, ax, ay, az, gx, gy, gz

        Returns:
            SensorSample in G and deg/s
        """
        accel = tuple(float(c) * float(G_PER_COUNT) for c in counts[0:3])
        gyro = tuple(float(c) * float(DEG_PER_SEC_PER_COUNT) for c in counts[3:6])
        return cls(accel=accel, gyro=gyro)

    @property
    def ax(self) -> float:
        return self.accel[0]

    @property
    def ay(self) -> float:
        return self.accel[1]

    @property
    def az(self) -> float:
        return self.accel[2]

    @property
    def force(self) -> float:
        """Euclidean norm of the acceleration vector (G)"""
        ax, ay, az = self.accel
        return math.sqrt(ax * ax + ay * ay + az * az)


@dataclass(frozen=True)
class Orientation:
    """Tilt angles in radians, both in (-pi, pi]"""
    pitch: float = 0.0
    roll: float = 0.0

    @property
    def pitch_degrees(self) -> float:
        return math.degrees(self.pitch)

    @property
    def roll_degrees(self) -> float:
        return math.degrees(self.roll)
