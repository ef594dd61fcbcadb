"""
Serial link to the IMU board

Owns one pyserial port for the life of the IMU source. Reads never block.
A read error closes the port and marks the link lost so the owner can
decide when to reopen it.
"""

import logging
import serial
import serial.tools.list_ports
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def enumerate_ports() -> List[Tuple[str, str]]:
    """
    Enumerate available serial ports

    Returns:
        List of (port_name, description) tuples sorted by name
    """
    ports = [(info.device, info.description)
             for info in serial.tools.list_ports.comports()]
    ports.sort(key=lambda x: x[0])
    return ports


class SerialLink:
    """
    One IMU serial connection

    States: closed, open, lost. ``lost`` is set only when an open port
    failed mid-stream; a deliberate close() clears it.
    """

    def __init__(self, port_name: str, baud_rate: int = 115200):
        self.port_name = port_name
        self.baud_rate = baud_rate
        self.port: Optional[serial.Serial] = None
        self.lost = False

    @property
    def is_open(self) -> bool:
        return self.port is not None and self.port.is_open

    def open(self) -> bool:
        """
        Open (or reopen) the port

        Returns:
            True if the port is open, False otherwise
        """
        self._release()
        try:
            self.port = serial.Serial(
                port=self.port_name,
                baudrate=self.baud_rate,
                timeout=0,
            )
        except (serial.SerialException, OSError) as e:
            logger.error(f"Failed to open {self.port_name}: {e}")
            self.port = None
            return False
        self.lost = False
        logger.info(f"Opened {self.port_name} at {self.baud_rate} baud")
        return True

    def close(self):
        self._release()
        self.lost = False

    def _release(self):
        if self.port is None:
            return
        try:
            self.port.close()
        except (serial.SerialException, OSError) as e:
            logger.warning(f"Error closing {self.port_name}: {e}")
        self.port = None

    def read_available(self) -> bytes:
        """Bytes received since the last read, or b'' if none or closed"""
        if not self.is_open:
            return b''
        try:
            waiting = self.port.in_waiting
            if waiting > 0:
                return self.port.read(waiting)
            return b''
        except (serial.SerialException, OSError) as e:
            logger.warning(f"Lost {self.port_name}: {e}")
            self._release()
            self.lost = True
            return b''
