#!/usr/bin/env python3
# accessnav/navigation/tests/test_coordinates.py

import sys
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from accessnav.navigation.utils.coordinates import (
    destination_point, distance_nm, distances_nm, heading_difference, magnetic_bearing,
    magnetic_bearings, normalize_heading, signed_angle, true_bearing
)

SEA = (47.4502, -122.3088)
SAMPLE_POINTS = [
    (0.0, 0.0), (47.4502, -122.3088), (64.13, -21.94), (-33.9461, 151.1772),
    (51.4700, -0.4543), (35.5494, 139.7798), (-89.0, 45.0), (10.0, 179.9)
]


class TestDistance(unittest.TestCase):
    def test_identical_points_are_zero(self):
        for lat, lon in SAMPLE_POINTS:
            self.assertEqual(distance_nm(lat, lon, lat, lon), 0.0)

    def test_symmetric(self):
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                self.assertAlmostEqual(distance_nm(*a, *b), distance_nm(*b, *a), places=9)

    def test_one_degree_of_latitude_is_sixty_miles(self):
        self.assertAlmostEqual(distance_nm(0.0, 0.0, 1.0, 0.0), 60.04, places=1)

    def test_known_city_pair(self):
        # Heathrow to Seattle is roughly 4160 NM great circle
        d = distance_nm(51.4700, -0.4543, *SEA)
        self.assertTrue(4100 < d < 4220)


class TestBearing(unittest.TestCase):
    def test_cardinal_bearings(self):
        self.assertAlmostEqual(true_bearing(0, 0, 1, 0), 0.0, places=6)
        self.assertAlmostEqual(true_bearing(0, 0, 0, 1), 90.0, places=6)
        self.assertAlmostEqual(true_bearing(0, 0, -1, 0), 180.0, places=6)
        self.assertAlmostEqual(true_bearing(0, 0, 0, -1), 270.0, places=6)

    def test_always_in_range(self):
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                bearing = true_bearing(*a, *b)
                self.assertGreaterEqual(bearing, 0.0)
                self.assertLess(bearing, 360.0)

    def test_zero_variation_matches_true_bearing(self):
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                self.assertEqual(magnetic_bearing(*a, *b, 0.0), true_bearing(*a, *b))

    def test_east_variation_is_subtracted(self):
        self.assertAlmostEqual(magnetic_bearing(0, 0, 0, 1, 15.0), 75.0, places=6)
        self.assertAlmostEqual(magnetic_bearing(0, 0, 1, 0, 15.0), 345.0, places=6)
        self.assertAlmostEqual(magnetic_bearing(0, 0, 1, 0, -15.0), 15.0, places=6)


class TestDestinationPoint(unittest.TestCase):
    def test_inverse_of_distance_and_bearing(self):
        for lat, lon in SAMPLE_POINTS[:6]:
            for bearing in (0, 45, 137.5, 180, 271, 359):
                for d in (0.5, 12.0, 250.0, 999.0):
                    dest = destination_point(lat, lon, bearing, d)
                    self.assertAlmostEqual(distance_nm(lat, lon, *dest), d, delta=1e-3)

    def test_initial_bearing_is_preserved(self):
        dest = destination_point(*SEA, 160.0, 20.0)
        self.assertAlmostEqual(true_bearing(*SEA, *dest), 160.0, places=4)


class TestAngles(unittest.TestCase):
    def test_normalize_heading(self):
        self.assertEqual(normalize_heading(360.0), 0.0)
        self.assertEqual(normalize_heading(-10.0), 350.0)
        self.assertEqual(normalize_heading(725.0), 5.0)
        self.assertLess(normalize_heading(-1e-20), 360.0)

    def test_signed_angle(self):
        self.assertEqual(signed_angle(190.0), -170.0)
        self.assertEqual(signed_angle(-190.0), 170.0)
        self.assertEqual(signed_angle(45.0), 45.0)

    def test_heading_difference_wraps(self):
        self.assertEqual(heading_difference(358.0, 3.0), 5.0)
        self.assertEqual(heading_difference(3.0, 358.0), 5.0)
        self.assertEqual(heading_difference(90.0, 270.0), 180.0)


class TestVectorized(unittest.TestCase):
    def test_matches_scalar_functions(self):
        lats = [p[0] for p in SAMPLE_POINTS]
        lons = [p[1] for p in SAMPLE_POINTS]
        distances = distances_nm(*SEA, lats, lons)
        bearings = magnetic_bearings(*SEA, lats, lons, 15.5)

        for i, (lat, lon) in enumerate(SAMPLE_POINTS):
            self.assertAlmostEqual(distances[i], distance_nm(*SEA, lat, lon), places=6)
            if distances[i] > 0:
                self.assertAlmostEqual(bearings[i], magnetic_bearing(*SEA, lat, lon, 15.5), places=6)
            self.assertTrue(0.0 <= bearings[i] < 360.0)


if __name__ == '__main__':
    unittest.main()
