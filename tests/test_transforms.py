"""
Unit tests for visualization transforms

Tests pitch/roll rotation and perspective projection
"""

import math
import unittest
import numpy as np
from motionlab.data.sensor_data import Orientation, SensorSample
from motionlab.fusion.tilt import estimate_orientation
from motionlab.visualization.transforms import (
    CUBE_VERTICES,
    CUBE_EDGES,
    project_model,
    project_cube,
)


def unrotated_projection(vertex, zoom):
    """Reference perspective projection without rotation"""
    x, y, z = vertex
    inv = 1.0 / (z + 4.0)
    return (round(x * zoom * inv + 120), round(y * zoom * inv + 67))


def scalar_projection(vertex, o, zoom):
    """One-vertex projection written out term by term"""
    x, y, z = vertex
    y1 = y * np.cos(o.pitch) - z * np.sin(o.pitch)
    z1 = y * np.sin(o.pitch) + z * np.cos(o.pitch)
    x2 = x * np.cos(o.roll) - z1 * np.sin(o.roll)
    z2 = x * np.sin(o.roll) + z1 * np.cos(o.roll)
    inv = 1.0 / (z2 + 4.0)
    return (int(np.rint(x2 * zoom * inv + 120)), int(np.rint(y1 * zoom * inv + 67)))


class TestRotation(unittest.TestCase):
    """Test pitch/roll rotation as seen through the projection"""

    def test_zero_orientation_is_identity(self):
        """Test that zero angles project the point unrotated"""
        points = project_model([(1.0, 2.0, 3.0)], Orientation(0.0, 0.0), 70.0)

        self.assertEqual(points, [(130, 87)])

    def test_pitch_90_rotates_z_into_minus_y(self):
        """Test 90 degree pitch about X: (0,0,1) -> (0,-1,0)"""
        points = project_model([(0.0, 0.0, 1.0)], Orientation(math.pi / 2, 0.0), 80.0)

        self.assertEqual(points, [(120, 47)])

    def test_roll_90_rotates_z_into_minus_x(self):
        """Test 90 degree roll about Y: (0,0,1) -> (-1,0,0)"""
        points = project_model([(0.0, 0.0, 1.0)], Orientation(0.0, math.pi / 2), 80.0)

        self.assertEqual(points, [(100, 67)])

    def test_pitch_applied_before_roll(self):
        """Test the rotation order against the term-by-term form"""
        o = Orientation(0.4, -0.9)
        points = project_model(CUBE_VERTICES, o, 150.0)
        for vertex, point in zip(CUBE_VERTICES, points):
            self.assertEqual(point, scalar_projection(tuple(vertex), o, 150.0))


class TestProjection(unittest.TestCase):
    """Test perspective projection of the cube"""

    def test_cube_geometry(self):
        """Test the static cube model"""
        self.assertEqual(CUBE_VERTICES.shape, (8, 3))
        self.assertEqual(len(CUBE_EDGES), 12)
        self.assertTrue(np.all(np.abs(CUBE_VERTICES) == 1))
        for a, b in CUBE_EDGES:
            # Every edge joins vertices differing in exactly one axis
            self.assertEqual(np.sum(CUBE_VERTICES[a] != CUBE_VERTICES[b]), 1)

    def test_cube_vertices_are_read_only(self):
        """Test that the shared model cannot be modified"""
        with self.assertRaises(ValueError):
            CUBE_VERTICES[0, 0] = 5.0

    def test_flat_sample_gives_unrotated_projection(self):
        """Test accel (0,0,1) projects to the plain perspective view"""
        orientation = estimate_orientation(SensorSample(accel=(0.0, 0.0, 1.0)))
        self.assertAlmostEqual(orientation.pitch, 0.0)
        self.assertAlmostEqual(orientation.roll, 0.0)

        zoom = 90.0
        points = project_cube(orientation, zoom)

        self.assertEqual(len(points), 8)
        for vertex, point in zip(CUBE_VERTICES, points):
            self.assertEqual(point, unrotated_projection(tuple(vertex), zoom))

    def test_flat_cube_known_points(self):
        """Test exact pixels for zoom 90: near face 30px, far face 18px"""
        points = project_cube(Orientation(0.0, 0.0), 90.0)

        self.assertEqual(points[0], (90, 37))     # (-1,-1,-1): 90/3 = 30
        self.assertEqual(points[6], (138, 85))    # (1,1,1): 90/5 = 18

    def test_projection_is_pure(self):
        """Test identical inputs always give identical outputs"""
        for pitch in np.linspace(-math.pi + 1e-3, math.pi, 13):
            for roll in np.linspace(-math.pi / 2, math.pi / 2, 7):
                o = Orientation(float(pitch), float(roll))
                first = project_cube(o, 120.0)
                second = project_cube(o, 120.0)
                self.assertEqual(first, second)

    def test_zero_zoom_collapses_to_center(self):
        """Test zoom 0 puts every vertex on the screen center"""
        points = project_cube(Orientation(1.0, 0.5), 0.0)
        self.assertTrue(all(p == (120, 67) for p in points))

    def test_max_zoom_stays_finite(self):
        """Test the depth offset keeps the denominator positive at max zoom"""
        for pitch in np.linspace(-math.pi, math.pi, 25):
            for roll in np.linspace(-math.pi / 2, math.pi / 2, 13):
                points = project_cube(Orientation(float(pitch), float(roll)), 200.0)
                for x, y in points:
                    self.assertTrue(-300 < x < 540)
                    self.assertTrue(-300 < y < 435)


if __name__ == '__main__':
    unittest.main()
