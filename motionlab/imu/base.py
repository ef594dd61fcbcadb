"""
IMU source interface

Every source delivers accelerometer readings in G and gyroscope readings
in deg/s. begin() must succeed before the first read; a source that cannot
start is fatal for the application.
"""

from abc import ABC, abstractmethod

from ..data.sensor_data import SensorSample, Vector3


class ImuInitError(RuntimeError):
    """Raised when the motion sensor cannot be started"""


class IMUSource(ABC):
    """Abstract accelerometer/gyroscope provider"""

    @abstractmethod
    def begin(self) -> bool:
        """Start the sensor; returns False if it is unavailable"""

    @abstractmethod
    def read_accel(self) -> Vector3:
        """Latest (x, y, z) acceleration in G"""

    @abstractmethod
    def read_gyro(self) -> Vector3:
        """Latest (x, y, z) angular rate in deg/s"""

    def read_sample(self) -> SensorSample:
        """Snapshot both sensors as one SensorSample"""
        return SensorSample(accel=self.read_accel(), gyro=self.read_gyro())

    def close(self) -> None:
        """Release the sensor"""

    def __enter__(self) -> 'IMUSource':
        if not self.begin():
            raise ImuInitError(f"{type(self).__name__} failed to start")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
