"""
Serial IMU source

Reads "Raw:" count lines from a microcontroller over pyserial and keeps
the most recent reading. Reads never block: each poll drains whatever bytes
arrived since the previous tick.

If the board disappears mid-run (cable pulled, reset) the source falls back
to the flat reading and retries the port once per SERIAL_RECONNECT_S.
"""

import logging
import time
from typing import Callable, Optional

import numpy as np

from ..data.sensor_data import SensorSample, Vector3
from ..serial.link import SerialLink
from ..serial.protocol import LineEnding, ProtocolParser
from ..utils.constants import SERIAL_RECONNECT_S
from .base import IMUSource

logger = logging.getLogger(__name__)


class SerialIMU(IMUSource):
    """
    IMU attached to a serial port

    Until the first complete line arrives, and while the link is lost, the
    source reports a device lying flat (0, 0, 1) G with no rotation.
    """

    def __init__(self, port_name: str, baud_rate: int = 115200,
                 line_ending: LineEnding = LineEnding.LF,
                 link: SerialLink = None,
                 clock: Optional[Callable[[], float]] = None):
        self.link = link if link is not None else SerialLink(port_name, baud_rate)
        self.clock = clock if clock is not None else time.monotonic

        self.parser = ProtocolParser()
        self.parser.set_line_ending(line_ending)
        self.parser.on_raw_data = self._on_raw_data

        self.latest = SensorSample()
        self.lines_received = 0
        self._next_retry: Optional[float] = None

    def begin(self) -> bool:
        if not self.link.open():
            return False
        self.parser.reset()
        return True

    def _on_raw_data(self, counts: np.ndarray):
        self.latest = SensorSample.from_counts(counts)
        self.lines_received += 1

    def _reconnect(self):
        now = self.clock()
        if self._next_retry is None:
            logger.warning("IMU stream lost, reporting flat until it returns")
            self.latest = SensorSample()
            self.parser.reset()
        elif now < self._next_retry:
            return
        if self.link.open():
            logger.info("IMU stream restored")
            self._next_retry = None
        else:
            self._next_retry = now + SERIAL_RECONNECT_S

    def poll(self) -> None:
        """Drain pending bytes into the parser"""
        if self.link.lost or self._next_retry is not None:
            self._reconnect()
            if self._next_retry is not None:
                return
        data = self.link.read_available()
        if data:
            self.parser.parse_bytes(data)
        elif self.link.lost:
            self._reconnect()

    def read_sample(self) -> SensorSample:
        self.poll()
        return self.latest

    def read_accel(self) -> Vector3:
        self.poll()
        return self.latest.accel

    def read_gyro(self) -> Vector3:
        self.poll()
        return self.latest.gyro

    def close(self) -> None:
        self.link.close()
