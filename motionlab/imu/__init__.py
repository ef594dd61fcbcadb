"""
IMU sources for Motion Lab
"""

from .base import IMUSource, ImuInitError
from .serial_imu import SerialIMU
from .simulated import SimulatedIMU

__all__ = [
    'IMUSource',
    'ImuInitError',
    'SerialIMU',
    'SimulatedIMU',
]
