"""
Coordinate transformations for visualization

Pitch/roll rotation and perspective projection of the wireframe model
"""

import numpy as np

from ..data.sensor_data import Orientation
from ..utils.constants import CAMERA_DEPTH, CENTER_X, CENTER_Y

# Unit cube in object space, shared read-only by every frame
CUBE_VERTICES = np.array([
    [-1, -1, -1], [1, -1, -1], [1, 1, -1], [-1, 1, -1],
    [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1],
], dtype=np.float64)
CUBE_VERTICES.setflags(write=False)

CUBE_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


def project_model(vertices, orientation: Orientation, zoom: float,
                  depth: float = CAMERA_DEPTH,
                  center=(CENTER_X, CENTER_Y)):
    """
    Project every vertex of a model in one vectorized pass

    Pure function: identical inputs always give identical points. The
    denominator (z + depth) must stay away from zero; for the unit cube
    |z| <= sqrt(3) after rotation, so a depth of 4.0 is safe.

    Args:
        vertices: (N, 3) array-like of object-space vertices
        orientation: Orientation with pitch/roll in radians
        zoom: scale factor in [0, 200]

    Returns:
        list: N (sx, sy) integer tuples
    """
    verts = np.asarray(vertices, dtype=np.float64)
    x, y, z = verts[:, 0], verts[:, 1], verts[:, 2]

    cp, sp = np.cos(orientation.pitch), np.sin(orientation.pitch)
    cr, sr = np.cos(orientation.roll), np.sin(orientation.roll)

    y1 = y * cp - z * sp
    z1 = y * sp + z * cp
    x2 = x * cr - z1 * sr
    z2 = x * sr + z1 * cr

    inv = 1.0 / (z2 + depth)
    sx = np.rint(x2 * zoom * inv + center[0]).astype(int)
    sy = np.rint(y1 * zoom * inv + center[1]).astype(int)

    return [(int(a), int(b)) for a, b in zip(sx, sy)]


def project_cube(orientation: Orientation, zoom: float):
    """Project the unit cube; returns 8 screen points in vertex order"""
    return project_model(CUBE_VERTICES, orientation, zoom)
