"""
Tests for great-circle navigation.
"""

from math import isfinite, radians
import unittest

import numpy as np
from pyproj import Geod

from geonav.config import EARTH_RADIUS
from geonav.geo import Bearing, GeoPoint, destination, distance, initial_bearing
from geonav.geo import great_circle
from geonav.unit import Kilometer, Meter, Second

SEATTLE = GeoPoint.from_deg(47.6062, -122.3321)
HONOLULU = GeoPoint.from_deg(21.3069, -157.8583)
LOS_ANGELES = GeoPoint.from_deg(34.0522, -118.2437)
SAN_FRANCISCO = GeoPoint.from_deg(37.7749, -122.4194)

SPHERE = Geod(a=float(EARTH_RADIUS), b=float(EARTH_RADIUS))


class TestDestination(unittest.TestCase):
    """Test moving along a great circle."""

    def test_one_degree_south_of_seattle(self):
        """111.32 km due south of Seattle is about one degree of latitude."""
        south = destination(SEATTLE, 180, 111_320)
        self.assertAlmostEqual(south.lat_deg, 46.6062, delta=0.01)
        self.assertAlmostEqual(south.lon_deg, -122.3321, places=6)

    def test_zero_distance_returns_origin(self):
        """Zero distance returns the start point."""
        self.assertEqual(destination(SEATTLE, 123.4, 0), SEATTLE)

    def test_due_east_on_equator(self):
        """One degree of arc due east along the equator."""
        point = destination(GeoPoint.from_deg(0, 0), 90, 111_194.93)
        self.assertAlmostEqual(point.lat_deg, 0.0, places=9)
        self.assertAlmostEqual(point.lon_deg, 1.0, places=6)

    def test_crossing_antimeridian_wraps_longitude(self):
        """Longitude wraps when crossing the antimeridian."""
        start = GeoPoint.from_deg(0, 179.5)
        point = destination(start, 90, 111_194.93)
        self.assertAlmostEqual(point.lon_deg, -179.5, places=5)
        self.assertGreaterEqual(point.lon_deg, -180.0)
        self.assertLess(point.lon_deg, 180.0)

    def test_from_pole_is_finite(self):
        """Moving away from a pole stays finite."""
        pole = GeoPoint.from_deg(90, 0)
        for bearing in (0, 90, 180, 270):
            point = destination(pole, bearing, 100_000)
            self.assertTrue(isfinite(point.lat_deg))
            self.assertTrue(isfinite(point.lon_deg))
            self.assertLess(point.lat_deg, 90.0)

    def test_round_trip(self):
        """Flying the initial bearing for the full distance reaches the target."""
        course = initial_bearing(SEATTLE, HONOLULU)
        arrival = destination(SEATTLE, course, distance(SEATTLE, HONOLULU))
        self.assertLess(distance(arrival, HONOLULU), 1.0)

    def test_forward_requires_units(self):
        """forward() rejects non-length distances and non-angle bearings."""
        with self.assertRaises(TypeError):
            SEATTLE.forward(Bearing(90), Second(10))
        with self.assertRaises(TypeError):
            SEATTLE.forward(Meter(10), Meter(10))

    def test_forward_accepts_any_length_unit(self):
        """Any length unit gives the same destination."""
        a = SEATTLE.forward(Bearing(45), Kilometer(10))
        b = SEATTLE.forward(Bearing(45), Meter(10_000))
        self.assertEqual(a, b)


class TestBearingAndDistance(unittest.TestCase):
    """Test initial bearing and haversine distance."""

    def test_cardinal_bearings(self):
        """Bearings toward the four cardinal directions."""
        origin = GeoPoint.from_deg(0, 0)
        self.assertAlmostEqual(initial_bearing(origin, GeoPoint.from_deg(0, 1)), 90.0)
        self.assertAlmostEqual(initial_bearing(origin, GeoPoint.from_deg(1, 0)), 0.0)
        self.assertAlmostEqual(initial_bearing(origin, GeoPoint.from_deg(0, -1)), 270.0)
        self.assertAlmostEqual(initial_bearing(origin, GeoPoint.from_deg(-1, 0)), 180.0)

    def test_bearing_in_range(self):
        """Bearings always fall in [0, 360)."""
        for end in (HONOLULU, LOS_ANGELES, SAN_FRANCISCO, GeoPoint.from_deg(47.6062, -122.3322)):
            bearing = initial_bearing(SEATTLE, end)
            self.assertGreaterEqual(bearing, 0.0)
            self.assertLess(bearing, 360.0)

    def test_coincident_points_have_zero_bearing(self):
        """Coincident points have bearing 0."""
        self.assertEqual(initial_bearing(SEATTLE, SEATTLE), 0.0)

    def test_distance_same_point(self):
        """Coincident points have distance 0."""
        self.assertEqual(distance(SEATTLE, SEATTLE), 0.0)

    def test_distance_symmetry(self):
        """Distance is symmetric."""
        self.assertEqual(distance(SEATTLE, HONOLULU), distance(HONOLULU, SEATTLE))

    def test_one_degree_of_arc(self):
        """One degree of arc on the mean Earth sphere."""
        self.assertAlmostEqual(
            distance(GeoPoint.from_deg(0, 0), GeoPoint.from_deg(1, 0)), 111_194.93, delta=0.01
        )

    def test_bearing_normalization(self):
        """Bearings normalize into [0, 360)."""
        self.assertAlmostEqual(Bearing(-90).degrees, 270.0)
        self.assertEqual(Bearing(360).degrees, 0.0)
        self.assertLess(Bearing.from_si(-1e-18).degrees, 360.0)

    def test_longitude_normalized_on_construction(self):
        """Longitudes normalize into [-180, 180)."""
        self.assertAlmostEqual(GeoPoint.from_deg(0, 190).lon_deg, -170.0)
        self.assertAlmostEqual(GeoPoint.from_deg(0, 181).lon_deg, -179.0)
        self.assertAlmostEqual(GeoPoint.from_deg(0, -122.5).lon_deg, -122.5, places=12)


class TestAgainstPyproj(unittest.TestCase):
    """Compare with pyproj's geodesic solver on a sphere of the same radius."""

    PAIRS = [
        (SEATTLE, HONOLULU),
        (LOS_ANGELES, SAN_FRANCISCO),
        (GeoPoint.from_deg(-33.8688, 151.2093), GeoPoint.from_deg(51.5074, -0.1278)),
        (GeoPoint.from_deg(10, 170), GeoPoint.from_deg(-10, -170)),
    ]

    def test_inverse(self):
        """Distance and bearing agree with pyproj."""
        for a, b in self.PAIRS:
            az12, _, dist = SPHERE.inv(a.lon_deg, a.lat_deg, b.lon_deg, b.lat_deg)
            self.assertAlmostEqual(distance(a, b), dist, delta=0.05)
            self.assertAlmostEqual(initial_bearing(a, b), az12 % 360.0, places=6)

    def test_forward(self):
        """Destinations agree with pyproj."""
        for a, b in self.PAIRS:
            course = initial_bearing(a, b)
            for leg in (1_000.0, 250_000.0, 3_000_000.0):
                lon, lat, _ = SPHERE.fwd(a.lon_deg, a.lat_deg, course, leg)
                point = destination(a, course, leg)
                self.assertAlmostEqual(point.lat_deg, lat, places=6)
                self.assertAlmostEqual(point.lon_deg, lon, places=6)


class TestVectorized(unittest.TestCase):
    """Array inputs give the same answers as scalar calls."""

    def setUp(self):
        rng = np.random.default_rng(3)
        self.lat = np.radians(rng.uniform(-60, 60, 50))
        self.lon = np.radians(rng.uniform(-180, 180, 50))
        self.azimuth = np.radians(rng.uniform(0, 360, 50))
        self.dist = rng.uniform(0, 1_000_000, 50)

    def test_forward(self):
        """Array forward matches scalar calls."""
        lat2, lon2 = great_circle.forward(self.lat, self.lon, self.azimuth, self.dist)
        self.assertEqual(lat2.shape, (50,))
        for i in range(50):
            s_lat, s_lon = great_circle.forward(
                float(self.lat[i]), float(self.lon[i]), float(self.azimuth[i]), float(self.dist[i])
            )
            self.assertIsInstance(s_lat, float)
            self.assertAlmostEqual(lat2[i], s_lat, places=12)
            self.assertAlmostEqual(lon2[i], s_lon, places=12)

    def test_haversine_and_bearing(self):
        """Array haversine and bearing match scalar calls."""
        lat2, lon2 = great_circle.forward(self.lat, self.lon, self.azimuth, self.dist)
        dist = great_circle.haversine(self.lat, self.lon, lat2, lon2)
        bearing = great_circle.initial_bearing(self.lat, self.lon, lat2, lon2)
        for i in range(50):
            self.assertAlmostEqual(
                dist[i],
                great_circle.haversine(
                    float(self.lat[i]), float(self.lon[i]), float(lat2[i]), float(lon2[i])
                ),
                places=6,
            )
            self.assertAlmostEqual(
                bearing[i],
                great_circle.initial_bearing(
                    float(self.lat[i]), float(self.lon[i]), float(lat2[i]), float(lon2[i])
                ),
                places=12,
            )
        np.testing.assert_allclose(dist, self.dist, rtol=1e-9, atol=1e-3)

    def test_wrap_longitude(self):
        """Longitudes wrap into [-pi, pi)."""
        wrapped = great_circle.wrap_longitude(np.array([radians(190), radians(-190), 0.0, np.pi]))
        np.testing.assert_allclose(wrapped, [radians(-170), radians(170), 0.0, -np.pi])


if __name__ == "__main__":
    unittest.main()
