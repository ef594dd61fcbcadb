"""
Serial communication for Motion Lab

Handles the IMU serial link and ASCII IMU line parsing.
"""

from .protocol import ProtocolParser, LineEnding
from .link import SerialLink, enumerate_ports

__all__ = [
    'ProtocolParser',
    'LineEnding',
    'SerialLink',
    'enumerate_ports',
]
