"""
Accelerometer tilt estimate

Direct trigonometric pitch/roll from a single accelerometer reading.
There is no filtering and no gyro integration: the estimate assumes gravity
is the dominant acceleration, so it is noisy and becomes meaningless while
the device is being shaken or accelerated. That is an accepted limitation
of the visualizations, not something to correct here.
"""

import math

from ..data.sensor_data import Orientation, SensorSample


def estimate_orientation(sample: SensorSample) -> Orientation:
    """
    Compute pitch and roll from one sample

    pitch = atan2(ay, az)
    roll  = atan2(-ax, sqrt(ay^2 + az^2))

    Args:
        sample: SensorSample (only accel is used)

    Returns:
        Orientation with both angles in (-pi, pi]
    """
    ax, ay, az = sample.accel
    pitch = math.atan2(ay, az)
    roll = math.atan2(-ax, math.sqrt(ay * ay + az * az))

    # atan2 can return exactly -pi (ay == -0.0, az < 0)
    if pitch == -math.pi:
        pitch = math.pi

    return Orientation(pitch=pitch, roll=roll)
