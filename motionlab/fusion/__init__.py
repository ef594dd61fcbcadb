"""
Orientation estimation
"""

from .tilt import estimate_orientation

__all__ = ['estimate_orientation']
