"""
ASCII line protocol parser for IMU streams

Accepts the MotionCal-style raw sensor line emitted by common IMU sketches:

- Raw:ax,ay,az,gx,gy,gz,mx,my,mz - 9 int16 counts (magnetometer ignored)
- Raw:ax,ay,az,gx,gy,gz          - 6 int16 counts

Accelerometer counts are 1/8192 G, gyroscope counts 1/16 deg/s.
"""

import logging
import numpy as np
from enum import IntEnum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class LineEnding(IntEnum):
    """Line ending modes"""
    NONE = 0  # No line ending
    LF = 1    # Line feed (\n)
    CR = 2    # Carriage return (\r)
    CRLF = 3  # Carriage return + line feed (\r\n)


class ProtocolParser:
    """
    Byte-stream parser that splits lines and decodes Raw: messages
    """

    RAW_PREFIX = 'Raw:'
    RAW_FIELD_COUNTS = (6, 9)

    def __init__(self):
        """Initialize protocol parser"""
        self.line_ending = LineEnding.LF

        # Current line buffer
        self.line_buffer = bytearray()
        self.max_line_length = 256

        # Callback receives an int16 array of 6 or 9 counts
        self.on_raw_data: Optional[Callable[[np.ndarray], None]] = None

    def set_line_ending(self, ending: LineEnding):
        """
        Set line ending mode

        Args:
            ending: Line ending type
        """
        self.line_ending = ending

    def parse_byte(self, byte: int):
        """
        Parse single byte from serial stream

        Args:
            byte: Byte value (0-255)
        """
        is_line_end = False

        if self.line_ending == LineEnding.NONE:
            # No terminator: a new "R" of "Raw:" closes the previous message
            if byte == ord('R') and self.line_buffer:
                self._process_line()
                self.line_buffer.clear()
        elif self.line_ending == LineEnding.LF:
            if byte == ord('\n'):
                is_line_end = True
        elif self.line_ending == LineEnding.CR:
            if byte == ord('\r'):
                is_line_end = True
        elif self.line_ending == LineEnding.CRLF:
            if byte == ord('\r'):
                return
            elif byte == ord('\n'):
                is_line_end = True

        if not is_line_end:
            if len(self.line_buffer) < self.max_line_length:
                self.line_buffer.append(byte)
            return

        self._process_line()
        self.line_buffer.clear()

    def parse_bytes(self, data: bytes):
        """
        Parse multiple bytes from serial stream

        Args:
            data: Bytes to parse
        """
        for byte in data:
            self.parse_byte(byte)

    def _process_line(self):
        """Process complete line buffer"""
        try:
            line = self.line_buffer.decode('ascii').strip()
        except UnicodeDecodeError:
            logger.debug("Dropping non-ASCII line")
            return

        if not line:
            return

        if line.startswith(self.RAW_PREFIX):
            self._parse_raw_line(line[len(self.RAW_PREFIX):])
        else:
            logger.debug(f"Ignoring line: {line!r}")

    def _parse_raw_line(self, data: str):
        """
        Parse Raw: message

        Format: "ax,ay,az,gx,gy,gz[,mx,my,mz]" comma-separated integers,
        clamped to the int16 range.

        Args:
            data: Data portion after "Raw:"
        """
        try:
            parts = data.split(',')
            if len(parts) not in self.RAW_FIELD_COUNTS:
                logger.debug(f"Raw line has {len(parts)} fields, dropping")
                return

            values = np.zeros(len(parts), dtype=np.int16)
            for i, part in enumerate(parts):
                val = int(part.strip())
                if val < -32768:
                    val = -32768
                elif val > 32767:
                    val = 32767
                values[i] = val

            if self.on_raw_data:
                self.on_raw_data(values)

        except (ValueError, IndexError):
            logger.debug(f"Malformed Raw line: {data!r}")

    def reset(self):
        """Reset parser state"""
        self.line_buffer.clear()
